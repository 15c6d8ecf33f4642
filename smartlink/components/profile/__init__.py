"""
Profile component - Profile document ownership and identity edits.
"""

from ._impl import DEFAULT_PROFILE_KEY, ProfileStore, apply_profile_edits
from .component import run_load, run_save_profile
from .models import ProfileOutput, SaveProfileInput
from .ports import ProfileStorePort

__all__ = [
    # Entry points
    "run_load",
    "run_save_profile",
    # Models
    "SaveProfileInput",
    "ProfileOutput",
    # Ports
    "ProfileStorePort",
    # Implementation
    "ProfileStore",
    "apply_profile_edits",
    "DEFAULT_PROFILE_KEY",
]
