"""
Links component - Outbound link list management.
"""

from ._impl import (
    DEFAULT_ICONS,
    DEFAULT_LINK_ICON,
    MAX_LINKS,
    SOCIAL_PLATFORMS,
    LinkService,
    build_link,
    classify,
    default_icon,
    detect_social_platform,
    link_css_class,
    normalize_color,
    normalize_url,
    validate_link_data,
)
from .component import (
    run_create,
    run_delete,
    run_get,
    run_list,
    run_move,
    run_update,
)
from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkListOutput,
    LinkOperationOutput,
    MoveLinkInput,
    UpdateLinkInput,
)
from .ports import LinkRepoPort

__all__ = [
    # Entry points
    "run_create",
    "run_update",
    "run_delete",
    "run_move",
    "run_get",
    "run_list",
    # Input models
    "CreateLinkInput",
    "UpdateLinkInput",
    "DeleteLinkInput",
    "MoveLinkInput",
    "GetLinkInput",
    # Output models
    "LinkOperationOutput",
    "LinkListOutput",
    # Ports
    "LinkRepoPort",
    # Service and helpers
    "LinkService",
    "MAX_LINKS",
    "DEFAULT_ICONS",
    "DEFAULT_LINK_ICON",
    "SOCIAL_PLATFORMS",
    "build_link",
    "classify",
    "default_icon",
    "detect_social_platform",
    "link_css_class",
    "normalize_color",
    "normalize_url",
    "validate_link_data",
]
