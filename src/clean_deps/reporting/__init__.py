"""Reporters for clean-up runs."""

from .base import Reporter
from .reporters import ConsoleReporter, JSONReporter, SilentReporter

__all__ = ["Reporter", "ConsoleReporter", "JSONReporter", "SilentReporter"]
