"""
Analytics component - Port interfaces.
"""

from smartlink.components.profile.ports import ProfileStorePort
from smartlink.core.ports.storage import KeyValueStorePort
from smartlink.core.ports.time import TimePort

__all__ = ["KeyValueStorePort", "ProfileStorePort", "TimePort"]
