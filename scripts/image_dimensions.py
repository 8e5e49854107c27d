#!/usr/bin/env python
"""Print the pixel dimensions of JPEG files.

Examples:
    # Every JPEG under the configured images_dir
    python scripts/image_dimensions.py

    # Specific files
    python scripts/image_dimensions.py assets/images/me.jpg assets/images/grad.jpg
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from portfolio.lib.jpeg import probe_file
from portfolio.tui.settings import get_settings


def describe(path: Path) -> str:
    """Return the report line for one file."""
    if not path.exists():
        return f"{path.name}: File not found"
    dimensions = probe_file(path)
    if dimensions is None:
        return f"{path.name}: Could not read dimensions"
    return f"{path.name}: {dimensions}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print JPEG image dimensions")
    parser.add_argument("files", nargs="*", type=Path, help="JPEG files to inspect")
    args = parser.parse_args(argv)

    files = args.files
    if not files:
        images_dir = get_settings().get_images_dir()
        files = sorted(
            p for p in images_dir.rglob("*") if p.suffix.lower() in (".jpg", ".jpeg")
        ) if images_dir.exists() else []

    print("Image Dimensions:")
    print("=================")
    for path in files:
        print(describe(path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
