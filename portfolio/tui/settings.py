"""Portfolio project settings loader.

Reads project-specific configuration from .portfolio.yaml in the project
root, so a portfolio repo can point the TUI at its own content file and the
image scripts at its own assets.

Example .portfolio.yaml:
    portfolio:
      content_file: ./content/portfolio.yaml   # Omit to use the bundled example
      images_dir: ./assets/images              # Used by the image scripts
      reduced_motion: null                     # true/false, or null to follow TEXTUAL_ANIMATIONS
      log_file: ./logs/portfolio.log
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

SETTINGS_FILE = ".portfolio.yaml"


@dataclass
class PortfolioSettings:
    """Portfolio configuration settings."""

    # Content YAML; None means the bundled example content
    content_file: Optional[str] = None

    # Where the image scripts look for source images
    images_dir: str = "./assets/images"

    # Force reduced motion on or off; None follows the app's animation level
    reduced_motion: Optional[bool] = None

    # Optional log file written while the TUI runs
    log_file: Optional[str] = None

    @classmethod
    def load(cls, project_root: Path | None = None) -> "PortfolioSettings":
        """Load settings from .portfolio.yaml in project root.

        Args:
            project_root: Project root directory. Defaults to cwd.

        Returns:
            PortfolioSettings with values from config file or defaults.
        """
        root = project_root or Path.cwd()
        config_path = root / SETTINGS_FILE

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}

            section = config.get("portfolio", {}) or {}
            reduced_motion = section.get("reduced_motion", cls.reduced_motion)
            return cls(
                content_file=section.get("content_file", cls.content_file),
                images_dir=section.get("images_dir", cls.images_dir),
                reduced_motion=None if reduced_motion is None else bool(reduced_motion),
                log_file=section.get("log_file", cls.log_file),
            )
        except (OSError, yaml.YAMLError, AttributeError) as e:
            logger.warning("Ignoring malformed %s: %s", config_path, e)
            return cls()

    def get_content_path(self, project_root: Path | None = None) -> Path | None:
        """Get absolute path to the content file, or None for bundled content."""
        if not self.content_file:
            return None
        root = project_root or Path.cwd()
        return (root / self.content_file).resolve()

    def get_images_dir(self, project_root: Path | None = None) -> Path:
        """Get absolute path to the images directory."""
        root = project_root or Path.cwd()
        return (root / self.images_dir).resolve()


# Global settings instance (loaded on first access)
_settings: PortfolioSettings | None = None


def get_settings(reload: bool = False) -> PortfolioSettings:
    """Get the global portfolio settings.

    Args:
        reload: Force reload from config file.

    Returns:
        PortfolioSettings instance.
    """
    global _settings
    if _settings is None or reload:
        _settings = PortfolioSettings.load()
    return _settings
