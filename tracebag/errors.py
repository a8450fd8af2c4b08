"""Tracebag error hierarchy and exceptions."""

from __future__ import annotations


class TracebagError(Exception):
    """Base exception for all Tracebag errors."""
    
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InvalidFormatError(TracebagError, ValueError):
    """Raised when inject/extract is called with a format no codec is registered for."""
    pass


class ConfigError(TracebagError):
    """Raised when configuration is invalid or cannot be read."""
    pass
