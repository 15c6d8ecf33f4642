"""
Theme component - Port interfaces.
"""

from smartlink.components.profile.ports import ProfileStorePort

__all__ = ["ProfileStorePort"]
