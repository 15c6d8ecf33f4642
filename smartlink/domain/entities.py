from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
ThemeMode = Literal["light", "dark"]

# Known link types. The field itself stays open-ended: unrecognized values are
# stored as given.
LINK_TYPES = ("default", "social", "email", "phone", "youtube", "spotify")

DEFAULT_PRIMARY_COLOR = "#0d6efd"
DEFAULT_AVATAR_URL = "assets/images/default-avatar.svg"
DELETED_LINK_TITLE = "Deleted link"


class Document(BaseModel):
    """Base for persisted documents: snake_case in Python, camelCase on disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Profile ---

class Theme(Document):
    mode: ThemeMode = "light"
    primary_color: str = Field(
        default=DEFAULT_PRIMARY_COLOR,
        validation_alias=AliasChoices("primaryColor", "primary", "primary_color"),
        serialization_alias="primaryColor",
    )
    preset: str | None = "default"


class Link(Document):
    title: str
    url: str
    type: str = "default"
    icon: str = ""
    color: str | None = None


class Profile(Document):
    username: str = "username"
    display_name: str = ""
    bio: str = ""
    avatar_url: str = Field(
        default="",
        validation_alias=AliasChoices("avatarUrl", "avatar", "avatar_url"),
        serialization_alias="avatarUrl",
    )
    banner_url: str = Field(
        default="",
        validation_alias=AliasChoices("bannerUrl", "banner", "banner_url"),
        serialization_alias="bannerUrl",
    )
    theme: Theme = Field(default_factory=Theme)
    links: list[Link] = Field(default_factory=list)


# --- Click statistics ---

class LinkClickStats(Document):
    clicks: int = Field(default=0, ge=0)
    last_click_timestamp: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "lastClickTimestamp", "lastClick", "last_click_timestamp"
        ),
        serialization_alias="lastClickTimestamp",
    )
    title: str = DELETED_LINK_TITLE


class ClickStats(Document):
    total_clicks: int = Field(default=0, ge=0)
    # Keyed by list position at click time ("link_<index>"), not link identity.
    links: dict[str, LinkClickStats] = Field(default_factory=dict)


# --- Export ---

class ExportDocument(Document):
    profile: Profile
    stats: ClickStats
    exported_at: datetime = Field(
        validation_alias=AliasChoices("exportedAt", "exportDate", "exported_at"),
        serialization_alias="exportedAt",
    )
    schema_version: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("schemaVersion", "version", "schema_version"),
        serialization_alias="schemaVersion",
    )


# --- Factories ---

def default_profile() -> Profile:
    """The profile written on first run and whenever a stored one is unusable."""
    return Profile(
        username="username",
        display_name="Your Name",
        bio="Your personalized bio",
        avatar_url=DEFAULT_AVATAR_URL,
        banner_url="",
        theme=Theme(mode="light", primary_color=DEFAULT_PRIMARY_COLOR, preset="default"),
        links=[],
    )


def default_stats() -> ClickStats:
    return ClickStats(total_clicks=0, links={})


def link_key(index: int) -> str:
    """Positional stats key for the link currently at ``index``."""
    return f"link_{index}"


def dump_document(doc: Document) -> dict:
    """JSON-ready dict using the on-disk (camelCase) field names."""
    return doc.model_dump(mode="json", by_alias=True)
