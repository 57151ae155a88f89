"""Task Service - owner-scoped task management backend."""

__version__ = "1.0.0"
