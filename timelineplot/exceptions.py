"""Exceptions raised by timelineplot."""

from __future__ import annotations


class TimelineError(Exception):
    """Base class for timelineplot errors."""


class ConfigurationError(TimelineError):
    """Invalid configuration, preset or option value."""


class CapabilityError(ConfigurationError):
    """A required rendering capability (e.g. text measurement) is missing."""
