"""Service modules for external integrations."""

from .storage import StorageService

__all__ = ["StorageService"]
