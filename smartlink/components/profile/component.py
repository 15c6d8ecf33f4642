"""
Profile component - Profile document load/edit.

Shell Layer - entry points used by the API and CLI.
"""

from __future__ import annotations

import logging

from ._impl import ProfileStore, apply_profile_edits
from .models import ProfileOutput, SaveProfileInput

logger = logging.getLogger(__name__)


def run_load(store: ProfileStore) -> ProfileOutput:
    """Load the profile (bootstrapping defaults on first run)."""
    profile, result = store.load_with_status()
    return ProfileOutput(profile=profile, persist=result)


def run_save_profile(input_data: SaveProfileInput, store: ProfileStore) -> ProfileOutput:
    """Apply a partial identity edit."""
    profile, result = store.update(lambda p: apply_profile_edits(p, input_data))
    if result.saved:
        logger.info("Profile saved for @%s", profile.username)
    return ProfileOutput(profile=profile, persist=result)
