"""Entry point for the Sticky Notes widget CLI."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.constants import NOTES_KEY, WIDGET_NOTES_KEY
from .core.models import DisplayList
from .log import configure_logging, logger
from .preferences import Preferences, load_preferences, save_storage_directory

# ---------------------------------------------------------------------------
# One-shot output
# ---------------------------------------------------------------------------


def _display_list(prefs: Preferences) -> DisplayList:
    from .app import build_pipeline

    return build_pipeline(prefs).load()


def _print_display_list(prefs: Preferences, console: Console) -> None:
    notes = _display_list(prefs)
    if not notes:
        console.print("[dim]No notes[/dim]")
        return
    for position, note in enumerate(notes):
        title = escape(note.display_title(prefs.display.placeholder_title))
        console.print(f"[bold]{position + 1}. {title}[/bold]  [dim]({note.id})[/dim]")
        if note.content:
            console.print(f"   {escape(note.content)}")


def _print_json(prefs: Preferences) -> None:
    notes = _display_list(prefs)
    payload = [
        {
            "id": n.id,
            "title": n.title,
            "content": n.content,
            "updatedAt": n.updated_at,
        }
        for n in notes
    ]
    print(json.dumps(payload, indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Storage health checks
# ---------------------------------------------------------------------------


def _run_doctor(prefs: Preferences, console: Console) -> int:
    """Print a storage health report.  Returns the exit code."""
    from .core.decoder import decode, decode_ids
    from .core.persistence import StoreReader

    reader = StoreReader(prefs.storage.directory, prefs.storage.file_prefix)
    console.print("Sticky Notes widget -- Storage Doctor\n")
    console.print(f"  Storage:  {reader.directory}")

    if not reader.directory.is_dir():
        console.print("  [red][!!][/red] storage directory not found")
        console.print("\n  The widget will show placeholder notes.")
        return 1

    files = reader.list_files()
    console.print(f"  Files:    {len(files)}")
    for name in files:
        console.print(f"            {escape(name)}")

    all_ok = True
    console.print()
    for key, decoder in ((NOTES_KEY, decode), (WIDGET_NOTES_KEY, decode_ids)):
        loaded = reader.load_raw(key)
        if not loaded.ok:
            marker = "[!!]" if key == NOTES_KEY else "[--]"
            console.print(f"  {escape(marker)} {key:24s}  {escape(loaded.error.reason)}")
            all_ok = all_ok and key != NOTES_KEY
            continue
        decoded = decoder(reader.read(key))
        if not decoded.ok:
            console.print(f"  [!!] {key:24s}  {escape(str(decoded.error))}")
            all_ok = False
        else:
            console.print(f"  {escape('[ok]')} {key:24s}  {len(decoded.value)} entries")

    console.print()
    console.print("  All checks passed." if all_ok else "  Some checks failed.")
    return 0 if all_ok else 1


def main(argv: list[str] | None = None) -> None:
    """Run the Sticky Notes widget."""
    parser = argparse.ArgumentParser(description="Sticky Notes home-screen widget")
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"sticky-widget {__version__}",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Preferences file (default: ~/.sticky-notes/widget-preferences.yaml)",
    )
    parser.add_argument(
        "--storage-dir",
        type=Path,
        help="Notes app storage directory (overrides preferences)",
    )
    parser.add_argument(
        "--save-storage-dir",
        action="store_true",
        help="Remember --storage-dir in the preferences file",
    )
    parser.add_argument(
        "--instances",
        "-n",
        type=int,
        help="Number of widgets to show",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the notes the widget would show and exit",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the notes the widget would show as JSON and exit",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check the notes storage and exit",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (overrides preferences)",
    )

    args = parser.parse_args(argv)
    if args.save_storage_dir and args.storage_dir is None:
        parser.error("--save-storage-dir requires --storage-dir")

    prefs = load_preferences(args.config)
    if args.storage_dir is not None:
        prefs.storage.directory = args.storage_dir.expanduser()
        if args.save_storage_dir:
            save_storage_directory(prefs.storage.directory, args.config)
    if args.instances is not None and args.instances > 0:
        prefs.display.instances = args.instances
    if args.log_level:
        prefs.logging.level = args.log_level.upper()

    one_shot = args.doctor or args.json or args.once
    configure_logging(
        prefs.logging.level, prefs.logging.file or None, console=one_shot
    )
    console = Console()

    if args.doctor:
        sys.exit(_run_doctor(prefs, console))

    if args.json:
        _print_json(prefs)
        return

    if args.once:
        _print_display_list(prefs, console)
        return

    try:
        from .app import run_app

        run_app(prefs)
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logger.debug("Fatal error in sticky-widget", exc_info=True)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
