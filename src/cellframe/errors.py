"""Exception types raised by cellframe."""


class CellframeError(Exception):
    """Base class for all cellframe errors."""


class ConfigurationError(CellframeError, ValueError):
    """
    A caller passed a structurally invalid configuration.

    These indicate a programming error in the consumer rather than a
    transient condition, so they are raised at the offending call and
    never retried.
    """


class InvalidCut(ConfigurationError):
    """Cut offsets given to divide() are not strictly increasing or out of range."""


class InvalidBreakpoints(ConfigurationError):
    """Breakpoint thresholds are not strictly increasing."""


class NoMatchingBreakpoint(ConfigurationError):
    """No breakpoint threshold is less than or equal to the available width."""
