"""Exceptions raised by tablescope."""


class TablescopeError(Exception):
    """Base class for tablescope errors."""


class LoaderError(TablescopeError):
    """Raised when a data file is missing, unsupported or malformed."""


class UnknownViewError(TablescopeError, KeyError):
    """Raised when a view tag is not in the view registry."""

    __str__ = Exception.__str__


class UnknownAttributeError(TablescopeError, KeyError):
    """Raised when the active view does not define an attribute."""

    __str__ = Exception.__str__
