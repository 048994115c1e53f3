"""Exceptions raised by Pixel Studio.

Editing operations never raise for expected control flow (out-of-bounds
pointers, unknown layer ids, exhausted history). These are reserved for
configuration and file payload problems.
"""


class PixelStudioError(Exception):
    """Base class for all Pixel Studio errors."""


class ConfigError(PixelStudioError):
    """The editor configuration file could not be used."""


class ProjectFormatError(PixelStudioError):
    """A project payload is not a readable pixel art file."""
