#!/usr/bin/env python
"""Convert portfolio images to WebP and generate responsive variants.

Examples:
    # Optimize the images_dir from .portfolio.yaml (default: assets/images)
    python scripts/optimize_images.py

    # Optimize a specific directory with custom widths
    python scripts/optimize_images.py static/img --widths 480 960

Exit codes:
    0 - Run completed (individual file failures are reported, not fatal)
    1 - The images directory could not be read, or an unexpected error
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from portfolio.lib.errors import AssetError
from portfolio.lib.images import RESPONSIVE_WIDTHS, WEBP_QUALITY, optimize_images
from portfolio.lib.logging import get_portfolio_logger, setup_logging
from portfolio.tui.settings import get_settings

logger = get_portfolio_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Optimize portfolio images (WebP + responsive widths)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "images_dir",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to optimize (default: images_dir from .portfolio.yaml)",
    )
    parser.add_argument(
        "--widths",
        nargs="+",
        type=int,
        default=list(RESPONSIVE_WIDTHS),
        help="Responsive widths in pixels (default: 320 720 1440)",
    )
    parser.add_argument(
        "--quality",
        type=int,
        default=WEBP_QUALITY,
        help="WebP quality 1-100 (default: 85)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    images_dir = args.images_dir or get_settings().get_images_dir()

    try:
        summary = optimize_images(images_dir, widths=args.widths, quality=args.quality)
    except AssetError as e:
        logger.error("%s", e)
        return 1
    except Exception:
        logger.exception("Fatal error during image optimization")
        return 1

    print("-" * 50)
    print("Optimization complete!")
    print(f"  Processed: {summary.processed}")
    print(f"  Failed: {summary.failed}")
    print("-" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
