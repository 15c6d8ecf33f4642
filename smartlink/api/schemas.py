"""Request/response models for the local HTTP API (camelCase on the wire)."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from smartlink.domain.entities import Link, Profile, Theme


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Requests ---


class ProfileUpdateRequest(ApiModel):
    username: str | None = None
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    banner_url: str | None = None


class LinkRequest(ApiModel):
    title: str = ""
    url: str = ""
    type: str = "default"
    icon: str | None = None
    color: str | None = None


class MoveLinkRequest(ApiModel):
    to_index: int


class ThemeModeRequest(ApiModel):
    mode: str


class ThemeColorRequest(ApiModel):
    primary_color: str


# --- Responses ---


class ProfileResponse(ApiModel):
    profile: Profile
    saved: bool


class LinkItemResponse(ApiModel):
    index: int
    title: str
    url: str
    type: str
    icon: str
    color: str | None
    css_class: str
    clicks: int


class LinkListResponse(ApiModel):
    items: list[LinkItemResponse]
    total: int
    can_add_more: bool
    max_links: int


class LinkResponse(ApiModel):
    index: int
    link: Link
    saved: bool


class SavedResponse(ApiModel):
    saved: bool


class ClickResponse(ApiModel):
    key: str
    clicks: int
    last_click_timestamp: datetime | None
    total_clicks: int
    saved: bool


class StatsRowResponse(ApiModel):
    key: str
    title: str
    clicks: int
    last_click_timestamp: datetime | None


class StatsResponse(ApiModel):
    total_clicks: int
    total_links: int
    average_clicks_per_link: int
    rows: list[StatsRowResponse]


class ThemeResponse(ApiModel):
    theme: Theme
    changed: bool
    saved: bool
