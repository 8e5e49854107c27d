"""Batch image optimization for portfolio assets.

Converts JPEG and PNG images to WebP and generates responsive width
variants next to each source file:

    me.jpg  ->  me.webp
                me-320.jpg, me-320.webp
                me-720.jpg, me-720.webp
                me-1440.jpg, me-1440.webp

A failure on one file is logged and counted; the batch carries on.
"""

from __future__ import annotations

import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from PIL import Image

from portfolio.lib.errors import AssetError
from portfolio.lib.logging import get_portfolio_logger

logger = get_portfolio_logger(__name__)

__all__ = [
    "SUPPORTED_FORMATS",
    "RESPONSIVE_WIDTHS",
    "WEBP_QUALITY",
    "OptimizationSummary",
    "find_images",
    "is_variant",
    "variant_path",
    "convert_to_webp",
    "generate_responsive_variants",
    "optimize_images",
]

SUPPORTED_FORMATS = (".jpg", ".jpeg", ".png")
RESPONSIVE_WIDTHS = (320, 720, 1440)
WEBP_QUALITY = 85

# Files already produced by generate_responsive_variants
_VARIANT_RE = re.compile(r"-\d+\.(jpg|jpeg|png|webp)$", re.IGNORECASE)


@dataclass
class OptimizationSummary:
    """Counts and outputs of one optimization run."""

    processed: int = 0
    failed: int = 0
    created: List[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.processed + self.failed


def find_images(directory: Path) -> List[Path]:
    """Recursively list supported images under ``directory``, sorted.

    Raises:
        AssetError: If a directory cannot be read
    """
    found: List[Path] = []
    try:
        entries = sorted(os.scandir(directory), key=lambda e: e.name)
    except OSError as e:
        raise AssetError(
            f"Cannot read images directory {directory}", path=str(directory), cause=e
        ) from e

    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir():
            found.extend(find_images(path))
        elif path.suffix.lower() in SUPPORTED_FORMATS:
            found.append(path)
    return found


def is_variant(path: Path) -> bool:
    """Check if ``path`` is a generated ``name-<width>.<ext>`` variant."""
    return bool(_VARIANT_RE.search(path.name))


def variant_path(path: Path, width: int, suffix: Optional[str] = None) -> Path:
    """Return the sibling path ``name-<width><suffix>`` for a source image."""
    return path.with_name(f"{path.stem}-{width}{suffix or path.suffix}")


def _prepare(img: Image.Image, suffix: str) -> Image.Image:
    """Convert ``img`` to a mode the target format can store."""
    suffix = suffix.lower()
    if suffix in (".jpg", ".jpeg") and img.mode not in ("RGB", "L"):
        return img.convert("RGB")
    if suffix == ".webp" and img.mode not in ("RGB", "RGBA"):
        has_alpha = img.mode in ("LA", "PA") or "transparency" in img.info
        return img.convert("RGBA" if has_alpha else "RGB")
    return img


def _resize_to_width(img: Image.Image, width: int) -> Image.Image:
    """Scale ``img`` down to ``width`` keeping aspect ratio; never enlarge."""
    if img.width <= width:
        return img.copy()
    height = max(1, round(img.height * width / img.width))
    return img.resize((width, height), Image.Resampling.LANCZOS)


def _save(img: Image.Image, target: Path, quality: int) -> None:
    img = _prepare(img, target.suffix)
    if target.suffix.lower() == ".webp":
        img.save(target, "WEBP", quality=quality)
    else:
        img.save(target)


def convert_to_webp(path: Path, quality: int = WEBP_QUALITY) -> Optional[Path]:
    """Write ``name.webp`` next to ``path``.

    Returns:
        The WebP path, or None if conversion failed (the error is logged)
    """
    output = path.with_suffix(".webp")
    try:
        with Image.open(path) as img:
            _save(img, output, quality)
    except (OSError, ValueError) as e:
        logger.error("Failed to convert %s: %s", path, e)
        return None

    logger.info("Created WebP: %s", output.name)
    return output


def generate_responsive_variants(
    path: Path,
    widths: Sequence[int] = RESPONSIVE_WIDTHS,
    quality: int = WEBP_QUALITY,
) -> List[Path]:
    """Write ``name-<width>.<ext>`` and ``name-<width>.webp`` for each width.

    A width that fails is logged and skipped; the others are still written.
    """
    variants: List[Path] = []

    for width in widths:
        output = variant_path(path, width)
        webp_output = variant_path(path, width, ".webp")
        try:
            with Image.open(path) as img:
                resized = _resize_to_width(img, width)
            _save(resized, output, quality)
            logger.info("Created %sw variant: %s", width, output.name)
            variants.append(output)

            _save(resized, webp_output, quality)
            logger.info("Created %sw WebP variant: %s", width, webp_output.name)
            variants.append(webp_output)
        except (OSError, ValueError) as e:
            logger.error("Failed to create %sw variant for %s: %s", width, path, e)

    return variants


def optimize_images(
    images_dir: Path,
    widths: Iterable[int] = RESPONSIVE_WIDTHS,
    quality: int = WEBP_QUALITY,
) -> OptimizationSummary:
    """Optimize every supported image under ``images_dir``.

    A missing directory is created and an empty summary returned.

    Raises:
        AssetError: If the directory tree cannot be read
    """
    images_dir = Path(images_dir)
    widths = tuple(widths)
    summary = OptimizationSummary()
    logger.set_context(images_dir=str(images_dir))

    if not images_dir.exists():
        logger.warning("Images directory not found: %s; creating it", images_dir)
        images_dir.mkdir(parents=True, exist_ok=True)
        return summary

    images = find_images(images_dir)
    if not images:
        logger.warning("No images found to optimize in %s", images_dir)
        return summary

    logger.info("Found %d image(s) to optimize", len(images))
    started = time.perf_counter()

    for image_path in images:
        logger.info("Processing: %s", image_path.name)
        webp = convert_to_webp(image_path, quality)
        if webp is None:
            summary.failed += 1
            continue

        summary.created.append(webp)
        if not is_variant(image_path):
            summary.created.extend(generate_responsive_variants(image_path, widths, quality))
        summary.processed += 1

    logger.metric("images_processed", summary.processed, unit="files")
    logger.metric("images_failed", summary.failed, unit="files")
    logger.metric("duration_seconds", round(time.perf_counter() - started, 3), unit="seconds")
    return summary
