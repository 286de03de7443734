"""Exceptions raised by the delve front end."""


class DelveError(Exception):
    """Base class for delve errors."""


class ConfigError(DelveError, ValueError):
    """The configuration file or one of its values is invalid."""


class EngineLoadError(DelveError, ImportError):
    """The game-logic module could not be imported or lacks a required name."""
