"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from SummerUserError.

Programming errors and bugs should NOT inherit from SummerUserError —
they will propagate with full tracebacks.
"""

from __future__ import annotations


class SummerUserError(Exception):
    """
    Base class for all user-facing errors.

    These errors indicate problems that the user can fix:
    a caret outside the file, an unreadable source, a malformed config,
    a presenter file that does not follow the view-state convention.
    """
    pass


class ConfigError(SummerUserError):
    """Malformed summer.yaml (or a file passed with --config)."""
    pass


class LocateError(SummerUserError):
    """Base class for failures while locating the proxy object to edit."""
    pass


class NoPresenterClass(LocateError):
    """The file has no top-level class whose name contains the presenter marker."""

    def __init__(self, marker: str):
        super().__init__(f"No class whose name contains '{marker}' found in file")
        self.marker = marker


class NoProxyProperty(LocateError):
    """The presenter class declares no proxy property. Treated as a no-op."""

    def __init__(self, presenter: str, property_name: str):
        super().__init__(f"Class '{presenter}' has no '{property_name}' property")
        self.presenter = presenter
        self.property_name = property_name


class StructuralAssumptionViolation(LocateError):
    """
    The presenter pattern's expected shape is absent.

    Raised before any node is inserted, so the tree is never left half-edited.
    """
    pass


__all__ = [
    "SummerUserError",
    "ConfigError",
    "LocateError",
    "NoPresenterClass",
    "NoProxyProperty",
    "StructuralAssumptionViolation",
]
