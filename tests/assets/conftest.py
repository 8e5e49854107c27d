"""Fixtures for image tooling tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image


def make_image(path: Path, size: tuple[int, int], mode: str = "RGB") -> Path:
    """Write a solid-colour image; the format follows the suffix."""
    path.parent.mkdir(parents=True, exist_ok=True)
    colour = (200, 80, 40, 128) if mode == "RGBA" else (200, 80, 40)
    Image.new(mode, size, colour).save(path)
    return path


@pytest.fixture
def images_dir(tmp_path: Path) -> Path:
    """An images directory with a large JPEG, a small PNG and a nested JPEG."""
    root = tmp_path / "images"
    make_image(root / "me.jpg", (1600, 900))
    make_image(root / "badge.png", (200, 200), mode="RGBA")
    make_image(root / "work" / "shot.jpeg", (800, 600))
    (root / "notes.txt").write_text("not an image", encoding="utf-8")
    return root
