"""Logging."""

from trousseau.infrastructure.monitoring.system_reporter import SystemReporter

__all__ = ["SystemReporter"]
