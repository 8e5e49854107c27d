"""Structured exception hierarchy for the portfolio.

Provides specific exception types for the failure modes of content loading
and asset processing. Form validation failures are not exceptions: they are
reported on the fields themselves.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "PortfolioError",
    "ContentError",
    "AssetError",
]


class PortfolioError(Exception):
    """Base exception for all portfolio errors.

    Provides structured error information for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.details = details or {}
        self.suggestion = suggestion

        parts = [message]

        if details:
            detail_lines = [f"  {k}: {v}" for k, v in details.items()]
            parts.append("\nDetails:")
            parts.extend(detail_lines)

        if suggestion:
            parts.append(f"\nSuggestion: {suggestion}")

        super().__init__("\n".join(parts) if len(parts) > 1 else message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": str(self.args[0]) if self.args else "",
            "details": self.details,
            "suggestion": self.suggestion,
        }


class ContentError(PortfolioError):
    """Error loading the portfolio content file.

    Raised when the YAML is unreadable, malformed, or missing required keys.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        key: Optional[str] = None,
        cause: Optional[Exception] = None,
        **kwargs: Any,
    ) -> None:
        self.path = path
        self.key = key
        self.cause = cause

        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        if key:
            details["key"] = key
        if cause:
            details["cause"] = str(cause)
            details["cause_type"] = type(cause).__name__

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = (
                "Check the content file against the bundled "
                "portfolio/tui/data/portfolio.yaml example."
            )

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)


class AssetError(PortfolioError):
    """Error processing image assets.

    Raised when the images directory cannot be read. Individual file
    conversion failures are logged and counted instead.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        cause: Optional[Exception] = None,
        **kwargs: Any,
    ) -> None:
        self.path = path
        self.cause = cause

        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        if cause:
            details["cause"] = str(cause)
            details["cause_type"] = type(cause).__name__

        super().__init__(message, details=details, **kwargs)
