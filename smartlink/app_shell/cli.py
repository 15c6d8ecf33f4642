import argparse
import logging
import sys
from pathlib import Path

from smartlink.app_shell.config import validate_ops_rules
from smartlink.app_shell.context import ServiceContext
from smartlink.components.analytics import (
    RecordClickInput,
    run_record_click,
    run_reset,
    run_summary,
)
from smartlink.components.links import (
    CreateLinkInput,
    DeleteLinkInput,
    MoveLinkInput,
    UpdateLinkInput,
    link_css_class,
    run_create,
    run_delete,
    run_list,
    run_move,
    run_update,
)
from smartlink.components.profile import SaveProfileInput, run_load, run_save_profile
from smartlink.components.snapshot import (
    ImportSnapshotInput,
    run_export,
    run_import,
    run_reset_all,
)
from smartlink.components.theme import (
    ApplyPresetInput,
    SetModeInput,
    SetPrimaryColorInput,
    run_apply_preset,
    run_set_mode,
    run_set_primary_color,
    run_toggle,
)
from smartlink.domain.errors import ValidationError
from smartlink.rules.loader import resolve_rules

logger = logging.getLogger("cli")


def get_context(rules_path: str | None) -> ServiceContext:
    try:
        rules = resolve_rules(Path(rules_path) if rules_path else None)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        sys.exit(1)

    logging.getLogger().setLevel(rules.logging.level)
    validate_ops_rules(rules)
    return ServiceContext.from_rules(rules)


def fail(errors: tuple[ValidationError, ...]) -> None:
    for err in errors:
        print(f"Error: {err.message}", file=sys.stderr)
    sys.exit(1)


def warn_unsaved(saved: bool) -> None:
    if not saved:
        print("Warning: change was not saved to disk.", file=sys.stderr)


def handle_show(ctx: ServiceContext, args: argparse.Namespace) -> None:
    profile = run_load(ctx.profile_store).profile
    print(f"@{profile.username} ({profile.display_name})")
    if profile.bio:
        print(profile.bio)
    print(f"Avatar: {profile.avatar_url or '-'}")
    print(f"Banner: {profile.banner_url or '-'}")
    theme = profile.theme
    print(f"Theme: {theme.mode}, {theme.primary_color} (preset: {theme.preset or '-'})")
    print(f"Links: {len(profile.links)}")


def handle_profile(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_save_profile(
        SaveProfileInput(
            username=args.username,
            display_name=args.display_name,
            bio=args.bio,
            avatar_url=args.avatar,
            banner_url=args.banner,
        ),
        ctx.profile_store,
    )
    print(f"Profile saved for @{result.profile.username}.")
    warn_unsaved(result.saved)


def handle_links(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_list(ctx.link_service)
    for index, link in enumerate(result.links):
        css = link_css_class(link)
        suffix = f"  [{css}]" if css else ""
        clicks = ctx.stats_tracker.clicks_for(index)
        print(f"{index:>2}  {link.title}  {link.url}  ({clicks} clicks){suffix}")
    print(f"{result.total}/{result.max_links} links")


def handle_add(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_create(
        CreateLinkInput(
            title=args.title, url=args.url, type=args.type, icon=args.icon, color=args.color
        ),
        ctx.link_service,
    )
    if not result.success:
        fail(result.errors)
    assert result.link is not None
    print(f"Link saved at position {result.index}: {result.link.url}")
    warn_unsaved(result.saved)


def handle_edit(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_update(
        UpdateLinkInput(
            index=args.index,
            title=args.title,
            url=args.url,
            type=args.type,
            icon=args.icon,
            color=args.color,
        ),
        ctx.link_service,
    )
    if not result.success:
        fail(result.errors)
    print(f"Link {args.index} saved.")
    warn_unsaved(result.saved)


def handle_delete(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_delete(DeleteLinkInput(index=args.index), ctx.link_service)
    if not result.success:
        fail(result.errors)
    print("Link deleted.")
    warn_unsaved(result.saved)


def handle_move(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_move(
        MoveLinkInput(from_index=args.from_index, to_index=args.to_index), ctx.link_service
    )
    if not result.success:
        fail(result.errors)
    print(f"Moved link {args.from_index} to {args.to_index}.")
    warn_unsaved(result.saved)


def handle_click(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_record_click(RecordClickInput(index=args.index), ctx.stats_tracker)
    if not result.success:
        fail(result.errors)
    assert result.entry is not None
    print(f"{result.key}: {result.entry.clicks} clicks ({result.total_clicks} total)")
    warn_unsaved(result.saved)


def handle_stats(ctx: ServiceContext, args: argparse.Namespace) -> None:
    summary = run_summary(ctx.stats_tracker)
    print(f"Total clicks: {summary.total_clicks}")
    print(f"Links: {summary.total_links}")
    print(f"Average clicks per link: {summary.average_clicks_per_link}")
    if not summary.rows:
        print("No clicks recorded yet.")
    for row in summary.rows:
        last = row.last_click_timestamp.date().isoformat() if row.last_click_timestamp else "Never"
        print(f"  {row.key:<10} {row.title:<30} {row.clicks:>6}  {last}")


def handle_export(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_export(ctx.snapshot_service)
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / result.filename
    path.write_text(result.content, encoding="utf-8")
    print(f"Data exported: {path}")


def handle_import(ctx: ServiceContext, args: argparse.Namespace) -> None:
    path = Path(args.file)
    if not path.exists():
        logger.error("Snapshot %s not found.", path)
        sys.exit(1)

    result = run_import(
        ImportSnapshotInput(content=path.read_bytes()), ctx.snapshot_service
    )
    if not result.success:
        fail(result.errors)
    print(f"Data imported from {path}.")
    warn_unsaved(result.saved)


def handle_theme(ctx: ServiceContext, args: argparse.Namespace) -> None:
    if args.action == "toggle":
        result = run_toggle(ctx.theme_engine)
    elif args.action == "mode":
        result = run_set_mode(SetModeInput(mode=args.value), ctx.theme_engine)
    elif args.action == "color":
        result = run_set_primary_color(SetPrimaryColorInput(color=args.value), ctx.theme_engine)
    else:
        result = run_apply_preset(ApplyPresetInput(name=args.value), ctx.theme_engine)
        if not result.changed:
            print(f"Unknown preset '{args.value}', theme unchanged.")

    if not result.success:
        fail(result.errors)
    print(f"Theme: {result.theme.mode}, {result.theme.primary_color}")
    if result.changed:
        warn_unsaved(result.saved)


def handle_reset(ctx: ServiceContext, args: argparse.Namespace) -> None:
    if args.stats_only:
        stats_result = run_reset(ctx.stats_tracker)
        print("Statistics reset.")
        warn_unsaved(stats_result.saved)
    else:
        all_result = run_reset_all(ctx.snapshot_service)
        print("All data reset.")
        warn_unsaved(all_result.saved)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SmartLink profile manager")
    parser.add_argument("--rules", help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("show", help="Show the profile")

    profile_parser = subparsers.add_parser("profile", help="Edit profile identity")
    profile_parser.add_argument("--username")
    profile_parser.add_argument("--display-name")
    profile_parser.add_argument("--bio")
    profile_parser.add_argument("--avatar", help="Avatar image URL")
    profile_parser.add_argument("--banner", help="Banner image URL (omit to clear)")

    subparsers.add_parser("links", help="List links")

    for name, help_text in (("add", "Add a link"), ("edit", "Replace a link")):
        link_parser = subparsers.add_parser(name, help=help_text)
        if name == "edit":
            link_parser.add_argument("index", type=int)
        link_parser.add_argument("title")
        link_parser.add_argument("url")
        link_parser.add_argument("--type", default="default")
        link_parser.add_argument("--icon")
        link_parser.add_argument("--color")

    delete_parser = subparsers.add_parser("delete", help="Delete a link")
    delete_parser.add_argument("index", type=int)

    move_parser = subparsers.add_parser("move", help="Move a link to another position")
    move_parser.add_argument("from_index", type=int)
    move_parser.add_argument("to_index", type=int)

    click_parser = subparsers.add_parser("click", help="Record a click on a link")
    click_parser.add_argument("index", type=int)

    subparsers.add_parser("stats", help="Show click statistics")

    export_parser = subparsers.add_parser("export", help="Export profile and stats")
    export_parser.add_argument("--out", default=".", help="Output directory")

    import_parser = subparsers.add_parser("import", help="Restore from an export file")
    import_parser.add_argument("file")

    theme_parser = subparsers.add_parser("theme", help="Change the theme")
    theme_parser.add_argument("action", choices=["toggle", "mode", "color", "preset"])
    theme_parser.add_argument("value", nargs="?")

    reset_parser = subparsers.add_parser("reset", help="Reset data to defaults")
    reset_parser.add_argument("--stats-only", action="store_true")

    return parser


HANDLERS = {
    "show": handle_show,
    "profile": handle_profile,
    "links": handle_links,
    "add": handle_add,
    "edit": handle_edit,
    "delete": handle_delete,
    "move": handle_move,
    "click": handle_click,
    "stats": handle_stats,
    "export": handle_export,
    "import": handle_import,
    "theme": handle_theme,
    "reset": handle_reset,
}


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "theme" and args.action != "toggle" and not args.value:
        parser.error(f"theme {args.action} needs a value")

    ctx = get_context(args.rules)
    HANDLERS[args.command](ctx, args)


if __name__ == "__main__":
    main()
