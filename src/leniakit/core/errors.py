"""Exception types raised while building Lenia model data."""


class LeniaError(Exception):
    """Base class for all LeniaKit errors."""


class ConfigurationError(LeniaError, ValueError):
    """A board, kernel or table cannot be built from the given parameters."""


class DomainError(LeniaError, ValueError):
    """A mapping was evaluated outside its declared domain."""
