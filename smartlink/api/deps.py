from functools import lru_cache

from fastapi import Depends

from smartlink.app_shell.context import ServiceContext
from smartlink.components.analytics import StatsTracker
from smartlink.components.links import LinkService
from smartlink.components.profile import ProfileStore
from smartlink.components.snapshot import SnapshotService
from smartlink.components.theme import ThemeEngine
from smartlink.rules.loader import resolve_rules
from smartlink.rules.models import Rules


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return resolve_rules()


# --- Engine ---
@lru_cache
def get_context() -> ServiceContext:
    return ServiceContext.from_rules(get_rules())


# --- Component Services ---
def get_profile_store(ctx: ServiceContext = Depends(get_context)) -> ProfileStore:
    return ctx.profile_store


def get_link_service(ctx: ServiceContext = Depends(get_context)) -> LinkService:
    return ctx.link_service


def get_stats_tracker(ctx: ServiceContext = Depends(get_context)) -> StatsTracker:
    return ctx.stats_tracker


def get_snapshot_service(ctx: ServiceContext = Depends(get_context)) -> SnapshotService:
    return ctx.snapshot_service


def get_theme_engine(ctx: ServiceContext = Depends(get_context)) -> ThemeEngine:
    return ctx.theme_engine
