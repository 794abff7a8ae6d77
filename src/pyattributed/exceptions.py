"""Custom exception hierarchy for pyattributed."""

from __future__ import annotations


class AttributedError(Exception):
    """Base exception for all pyattributed errors."""


class AttributedConfigError(AttributedError):
    """Invalid or missing configuration."""

    def __init__(
        self,
        message: str,
        *,
        variable: str = "",
        value: str | None = None,
    ) -> None:
        self.variable = variable
        self.value = value
        super().__init__(message)
