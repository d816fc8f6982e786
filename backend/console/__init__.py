"""Text console for playing moves against a single board."""

from .session import ConsoleSession

__all__ = ["ConsoleSession"]
