from __future__ import annotations

from dataclasses import dataclass

from smartlink.adapters.clock import SystemClock
from smartlink.adapters.memory_storage import InMemoryKeyValueStore
from smartlink.app_shell.config import create_storage
from smartlink.components.analytics import StatsTracker
from smartlink.components.links import LinkService
from smartlink.components.profile import ProfileStore
from smartlink.components.snapshot import SnapshotService
from smartlink.components.theme import ThemeEngine
from smartlink.core.ports.storage import KeyValueStorePort
from smartlink.core.ports.time import TimePort
from smartlink.rules.models import Rules


@dataclass
class ServiceContext:
    """
    One SmartLink engine instance.

    Every component shares the injected key-value store; nothing here is a
    module-level singleton.
    """

    rules: Rules
    storage: KeyValueStorePort
    clock: TimePort
    profile_store: ProfileStore
    link_service: LinkService
    stats_tracker: StatsTracker
    snapshot_service: SnapshotService
    theme_engine: ThemeEngine

    @classmethod
    def create(
        cls,
        storage: KeyValueStorePort,
        rules: Rules | None = None,
        clock: TimePort | None = None,
    ) -> ServiceContext:
        rules = rules or Rules()
        clock = clock or SystemClock()

        profile_store = ProfileStore(storage, key=rules.storage.profile_key)
        link_service = LinkService(profile_store, max_links=rules.limits.max_links)
        stats_tracker = StatsTracker(
            storage, profile_store, clock, key=rules.storage.stats_key
        )
        snapshot_service = SnapshotService(
            profile_store,
            stats_tracker,
            clock,
            schema_version=rules.export.schema_version,
            filename_prefix=rules.export.filename_prefix,
        )
        theme_engine = ThemeEngine(profile_store)

        return cls(
            rules=rules,
            storage=storage,
            clock=clock,
            profile_store=profile_store,
            link_service=link_service,
            stats_tracker=stats_tracker,
            snapshot_service=snapshot_service,
            theme_engine=theme_engine,
        )

    @classmethod
    def from_rules(cls, rules: Rules, clock: TimePort | None = None) -> ServiceContext:
        return cls.create(create_storage(rules), rules=rules, clock=clock)

    @classmethod
    def in_memory(cls, clock: TimePort | None = None) -> ServiceContext:
        return cls.create(InMemoryKeyValueStore(), clock=clock)
