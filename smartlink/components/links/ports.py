"""
Links component - Port interfaces.

Links live inside the profile document, so the repository's port is the
profile store itself.
"""

from smartlink.components.profile.ports import ProfileStorePort

LinkRepoPort = ProfileStorePort

__all__ = ["LinkRepoPort"]
