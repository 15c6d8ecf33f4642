"""
LinkService - Ordered link list management.

Handles link creation, replacement, deletion, reordering and validation.
All mutations go through the profile store's update path so each one is
checked and applied under the same lock.

Key behaviors:
- Title and URL are required; the list is capped at MAX_LINKS
- URLs without a known scheme get https:// prepended
- Icon defaults from the link type; the theme color is stored as null
- New links are appended (most recently added is last)
- Positions shift on delete/move; click stats keyed by position do not
"""

from __future__ import annotations

import logging

from smartlink.core.documents import PersistResult
from smartlink.domain.entities import DEFAULT_PRIMARY_COLOR, Link, Profile
from smartlink.domain.errors import (
    LIMIT_REACHED,
    MISSING_FIELD,
    ValidationError,
    index_out_of_range,
)

from .ports import LinkRepoPort

logger = logging.getLogger(__name__)

MAX_LINKS = 50

URL_SCHEMES = ("http://", "https://", "mailto:", "tel:")

DEFAULT_LINK_ICON = "fas fa-link"
DEFAULT_ICONS = {
    "social": "fas fa-share-alt",
    "email": "fas fa-envelope",
    "phone": "fas fa-phone",
    "youtube": "fab fa-youtube",
    "spotify": "fab fa-spotify",
}

# Checked in order, first substring match wins.
SOCIAL_PLATFORMS: tuple[tuple[str, str], ...] = (
    ("instagram.com", "instagram"),
    ("youtube.com", "youtube"),
    ("youtu.be", "youtube"),
    ("spotify.com", "spotify"),
    ("twitter.com", "twitter"),
    ("x.com", "twitter"),
    ("linkedin.com", "linkedin"),
    ("tiktok.com", "tiktok"),
    ("facebook.com", "facebook"),
    ("github.com", "github"),
)


# --- Normalization Functions ---


def normalize_url(url: str) -> str:
    """Prepend https:// unless the URL already carries a supported scheme."""
    if not url.startswith(URL_SCHEMES):
        return "https://" + url
    return url


def default_icon(link_type: str) -> str:
    return DEFAULT_ICONS.get(link_type, DEFAULT_LINK_ICON)


def normalize_color(color: str | None) -> str | None:
    """Null means "use the theme color"; the stock theme color is stored as null."""
    if not color or not color.strip():
        return None
    color = color.strip()
    return None if color.lower() == DEFAULT_PRIMARY_COLOR else color


def detect_social_platform(url: str) -> str | None:
    for domain, platform in SOCIAL_PLATFORMS:
        if domain in url:
            return platform
    return None


def classify(link: Link) -> str | None:
    """Social platform for presentation, only for links of type ``social``."""
    if link.type == "social":
        return detect_social_platform(link.url)
    return None


def link_css_class(link: Link) -> str:
    platform = classify(link)
    return f"social-{platform}" if platform else ""


# --- Validation Functions ---


def validate_link_data(title: str | None, url: str | None) -> list[ValidationError]:
    """Validate link data."""
    errors: list[ValidationError] = []

    if not title or not title.strip():
        errors.append(
            ValidationError(code=MISSING_FIELD, message="Title is required", field="title")
        )

    if not url or not url.strip():
        errors.append(
            ValidationError(code=MISSING_FIELD, message="URL is required", field="url")
        )

    return errors


def build_link(
    title: str,
    url: str,
    link_type: str = "default",
    icon: str | None = None,
    color: str | None = None,
) -> Link:
    """Normalize a validated candidate into a stored Link."""
    link_type = (link_type or "default").strip() or "default"
    return Link(
        title=title.strip(),
        url=normalize_url(url.strip()),
        type=link_type,
        icon=(icon or "").strip() or default_icon(link_type),
        color=normalize_color(color),
    )


class _Rejected(Exception):
    """Aborts a profile update without writing."""

    def __init__(self, error: ValidationError) -> None:
        super().__init__(error.message)
        self.error = error


def _check_index(profile: Profile, index: int, field: str = "index") -> None:
    if not 0 <= index < len(profile.links):
        raise _Rejected(index_out_of_range(index, len(profile.links), field))


# --- Link Service ---


class LinkService:
    """
    Link repository.

    Operates on the link list inside the profile document.
    Service methods return (link, errors, persist); ``persist`` is None when
    the request was rejected and nothing was written.
    """

    def __init__(self, repo: LinkRepoPort, max_links: int = MAX_LINKS) -> None:
        """Initialize service."""
        self._repo = repo
        self.max_links = max_links

    def get_all(self) -> list[Link]:
        """Get all links in display order."""
        return self._repo.get().links

    def get(self, index: int) -> Link | None:
        links = self.get_all()
        if 0 <= index < len(links):
            return links[index]
        return None

    def can_add_more(self) -> bool:
        return len(self.get_all()) < self.max_links

    def create(
        self,
        title: str,
        url: str,
        link_type: str = "default",
        icon: str | None = None,
        color: str | None = None,
    ) -> tuple[Link | None, list[ValidationError], PersistResult | None]:
        """
        Append a new link.

        Returns:
            Tuple of (link, errors, persist). Link is None if validation fails.
        """
        errors = validate_link_data(title, url)
        if errors:
            return None, errors, None

        link = build_link(title, url, link_type, icon, color)

        def append(profile: Profile) -> Profile:
            if len(profile.links) >= self.max_links:
                raise _Rejected(
                    ValidationError(
                        code=LIMIT_REACHED,
                        message=f"Technical limit of {self.max_links} links reached",
                    )
                )
            profile.links.append(link)
            return profile

        try:
            _, persist = self._repo.update(append)
        except _Rejected as rejected:
            return None, [rejected.error], None

        logger.debug("Link added: %s", link.url)
        return link, [], persist

    def update(
        self,
        index: int,
        title: str,
        url: str,
        link_type: str = "default",
        icon: str | None = None,
        color: str | None = None,
    ) -> tuple[Link | None, list[ValidationError], PersistResult | None]:
        """
        Replace the link at ``index``.

        Returns:
            Tuple of (link, errors, persist). Link is None if not found or validation fails.
        """
        errors = validate_link_data(title, url)
        if errors:
            return None, errors, None

        link = build_link(title, url, link_type, icon, color)

        def replace(profile: Profile) -> Profile:
            _check_index(profile, index)
            profile.links[index] = link
            return profile

        try:
            _, persist = self._repo.update(replace)
        except _Rejected as rejected:
            return None, [rejected.error], None

        return link, [], persist

    def delete(self, index: int) -> tuple[bool, list[ValidationError], PersistResult | None]:
        """
        Remove the link at ``index``; later links move up one position.

        Returns:
            Tuple of (success, errors, persist).
        """

        def remove(profile: Profile) -> Profile:
            _check_index(profile, index)
            del profile.links[index]
            return profile

        try:
            _, persist = self._repo.update(remove)
        except _Rejected as rejected:
            return False, [rejected.error], None

        logger.debug("Link at position %d deleted", index)
        return True, [], persist

    def move(
        self, from_index: int, to_index: int
    ) -> tuple[Link | None, list[ValidationError], PersistResult | None]:
        """
        Move the link at ``from_index`` so it ends up at ``to_index``.

        Returns:
            Tuple of (moved link, errors, persist).
        """
        moved: list[Link] = []

        def reorder(profile: Profile) -> Profile:
            _check_index(profile, from_index, "from_index")
            _check_index(profile, to_index, "to_index")
            link = profile.links.pop(from_index)
            profile.links.insert(to_index, link)
            moved.append(link)
            return profile

        try:
            _, persist = self._repo.update(reorder)
        except _Rejected as rejected:
            return None, [rejected.error], None

        return moved[0], [], persist
