"""Entry point for the harpoon-tui CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .core.commands.harpoon_cmds import EMPTY_LISTING, format_listing
from .core.errors import HarpoonError
from .core.persistence import HarpoonStore
from .log import logger, setup_logging
from .platform import current_working_dir
from .preferences import load_preferences


def _print_listing(store_path: Path) -> int:
    """Print the current project's bookmarks; return the exit code."""
    try:
        store = HarpoonStore.open(store_path, current_working_dir())
    except HarpoonError as exc:
        print(f"harpoon-tui: {exc}", file=sys.stderr)
        return 1
    project = store.project()
    print(format_listing(project) if project.files else EMPTY_LISTING)
    return 0


def main():
    """Run harpoon-tui."""
    parser = argparse.ArgumentParser(
        description="Terminal editor with numbered, per-project file bookmarks"
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"harpoon-tui {__version__}",
    )
    parser.add_argument(
        "--store",
        type=str,
        help="Bookmark file (default: $HARPOON_STORE or ~/.harpoon/harpoon.json)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Preferences file (default: ~/.harpoon/preferences.yaml)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print this project's bookmarks and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Write a debug log to ~/.harpoon/harpoon.log",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="File to open",
    )

    args = parser.parse_args()
    setup_logging(debug=args.debug)

    prefs = load_preferences(Path(args.config).expanduser() if args.config else None)
    store_path = prefs.store_path(args.store)

    if args.list:
        sys.exit(_print_listing(store_path))

    try:
        from harpoon_tui.app import run_app

        run_app(
            path=Path(args.file) if args.file else None,
            prefs=prefs,
            store_path=store_path,
        )
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logger.debug("Fatal error in harpoon-tui", exc_info=True)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
