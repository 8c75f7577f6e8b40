"""
Exception types for brewing-units.

All exceptions inherit from BrewingUnitsError for easy catching
of any library-related errors.
"""


class BrewingUnitsError(Exception):
    """Base exception for all brewing-units errors."""

    pass


class NumericParseError(BrewingUnitsError, ValueError):
    """
    Raised when the numeric part of a measurement string is not a number.

    Unit recognition never raises; this is the only error a parse can end in.
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Cannot parse {text!r} as a number")


class UnitConversionError(BrewingUnitsError):
    """Raised when a unit conversion fails."""

    pass


class ConfigurationError(BrewingUnitsError):
    """Raised when configuration is invalid or missing."""

    pass
