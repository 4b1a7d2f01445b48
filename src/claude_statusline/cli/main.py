#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from claude_statusline.config.paths import get_config_path
from claude_statusline.session import SessionParseError
from claude_statusline.ui.config import load_config
from claude_statusline.ui.statusline import render

logger = logging.getLogger(__name__)

EPILOG = """\
Configure in ~/.claude/settings.json:
  {
    "statusLine": {"type": "command", "command": "claude-statusline"}
  }

Overrides: [cost|duration|model|percentage|tokens] tables with color/icon
keys in the config file, or CLAUDE_STATUSLINE_<FIELD>_<COLOR|ICON>.
"""


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="claude-statusline",
        description="Render a status line from the session JSON on stdin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Config file (default: {get_config_path()})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    config = load_config(args.config)
    payload = sys.stdin.buffer.read()
    logger.debug("Read %d bytes of session data", len(payload))

    try:
        line = render(payload, config)
    except SessionParseError as e:
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        return 1

    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
