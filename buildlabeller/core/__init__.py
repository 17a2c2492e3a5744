"""Core interfaces shared by labellers and their collaborators."""

from .interfaces import Clock, RevisionProvider, VersionSourceProvider

__all__ = ["Clock", "RevisionProvider", "VersionSourceProvider"]
