"""Pound CLI entry point.

Allows running via `python -m pound` and provides the console script
defined in `pyproject.toml`.

Usage:
    pound [FILE]
"""

from __future__ import annotations

import sys
from typing import Optional

from .config import configure_logging, load_config
from .document import Document
from .terminal import TerminalError
from .viewer import Viewer

USAGE = "usage: pound [FILE]"


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        return 2

    config = load_config()
    configure_logging(config)

    # Load before touching the terminal: a bad file never shows any UI
    document = Document.empty(config.tab_stop)
    if args:
        try:
            document = Document.from_file(args[0], tab_stop=config.tab_stop)
        except (OSError, UnicodeDecodeError) as e:
            print(f"pound: cannot open {args[0]}: {e}", file=sys.stderr)
            return 1

    try:
        Viewer(document, config=config).run()
    except TerminalError as e:
        print(f"pound: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
