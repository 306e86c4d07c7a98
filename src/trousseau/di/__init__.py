"""Dependency injection."""

from trousseau.di.container import Container

__all__ = ["Container"]
