"""Entry point for running the portfolio TUI as a module.

Usage:
    python -m portfolio.tui                      # Bundled example content
    python -m portfolio.tui content.yaml         # Your own content file
    python -m portfolio.tui --reduced-motion     # Reveal everything, no animation
"""

from __future__ import annotations

import sys

from portfolio.lib.errors import ContentError
from portfolio.lib.logging import setup_logging
from portfolio.tui.app import PortfolioApp
from portfolio.tui.models.content import PortfolioContent
from portfolio.tui.settings import get_settings


def main() -> None:
    """Run the TUI application."""
    args = sys.argv[1:]

    content_path = None
    reduced_motion = None

    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--reduced-motion":
            reduced_motion = True
            i += 1
        elif arg == "--help" or arg == "-h":
            print(__doc__)
            sys.exit(0)
        elif not arg.startswith("-"):
            # Positional argument is the content file
            content_path = arg
            i += 1
        else:
            print(f"Unknown argument: {arg}")
            print(__doc__)
            sys.exit(1)

    settings = get_settings()
    setup_logging(console=False, log_file=settings.log_file)

    try:
        content = PortfolioContent.load(content_path or settings.get_content_path())
    except ContentError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    app = PortfolioApp(
        content=content,
        reduced_motion=reduced_motion,
        settings=settings,
    )
    app.run()


if __name__ == "__main__":
    main()
