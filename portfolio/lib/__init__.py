"""Portfolio library modules.

Errors, logging, and the image asset tooling shared by the TUI and the
command-line scripts.
"""

from portfolio.lib.errors import AssetError, ContentError, PortfolioError
from portfolio.lib.images import OptimizationSummary, optimize_images
from portfolio.lib.jpeg import ImageDimensions, probe_file, read_jpeg_dimensions
from portfolio.lib.logging import get_portfolio_logger, setup_logging

__all__ = [
    "AssetError",
    "ContentError",
    "PortfolioError",
    "OptimizationSummary",
    "optimize_images",
    "ImageDimensions",
    "probe_file",
    "read_jpeg_dimensions",
    "get_portfolio_logger",
    "setup_logging",
]
