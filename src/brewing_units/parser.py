"""
Parsing of free-form measurement strings into typed quantities.

Strings such as "123 mg", "5gal" or "20C" are split into a numeric mantissa
and a trailing unit token. The token selects the unit from a per-kind table;
a bare number, or a token the table does not know, is read as a whole in the
kind's canonical unit (Celsius, litres, grams). Empty input is zero.

Temperature and volume tokens are case-insensitive. Mass tokens are
case-sensitive so that "T" (metric tonne) stays distinct.

Parsing is pure: the tables and patterns below are never modified.
"""

import re
from dataclasses import dataclass
from enum import Enum

from brewing_units.exceptions import NumericParseError, UnitConversionError
from brewing_units.quantities import (
    Mass,
    Quantity,
    QuantityKind,
    Temperature,
    Volume,
)
from brewing_units.units import MassUnit, TemperatureUnit, VolumeUnit


# Leading whitespace only, then optional sign, digits and decimal points
# (may be empty), then one optional space
_MANTISSA = r"\A\s*([+-]?[0-9.]*)\s?"

TEMPERATURE_PATTERN = re.compile(_MANTISSA + r"([a-zA-Z])\Z")
VOLUME_PATTERN = re.compile(_MANTISSA + r"([a-zA-Z]{1,3}[0-9]?|[μµ][lL]|ʒ)\Z")
MASS_PATTERN = re.compile(_MANTISSA + r"([a-zA-Zμµ]{1,3})\Z")

TEMPERATURE_TOKENS: dict[str, TemperatureUnit] = {
    "f": TemperatureUnit.F,
    "c": TemperatureUnit.C,
    "k": TemperatureUnit.K,
    "r": TemperatureUnit.R,
}

VOLUME_TOKENS: dict[str, VolumeUnit] = {
    "cm3": VolumeUnit.CM3,
    "ft3": VolumeUnit.FT3,
    "yd3": VolumeUnit.YD3,
    "in3": VolumeUnit.IN3,
    "gal": VolumeUnit.GAL,
    "cup": VolumeUnit.CUP,
    "tsp": VolumeUnit.TSP,
    "ml": VolumeUnit.ML,
    "m3": VolumeUnit.M3,
    "μl": VolumeUnit.DROP,  # Greek mu
    "µl": VolumeUnit.DROP,  # micro sign
    "dr": VolumeUnit.DR,
    "l": VolumeUnit.L,
    "p": VolumeUnit.PT,
    "ʒ": VolumeUnit.PT,
}

# Case-sensitive
MASS_TOKENS: dict[str, MassUnit] = {
    "ug": MassUnit.UG,
    "μg": MassUnit.UG,
    "µg": MassUnit.UG,
    "mg": MassUnit.MG,
    "ct": MassUnit.CT,
    "g": MassUnit.G,
    "kg": MassUnit.KG,
    "T": MassUnit.T,
    "gr": MassUnit.GR,
    "dwt": MassUnit.DWT,
    "oz": MassUnit.OZ,
    "st": MassUnit.ST,
    "lbs": MassUnit.LB,
}


@dataclass(frozen=True)
class UnitGrammar:
    """Trailing-token pattern and token table for one quantity kind."""

    quantity: type[Quantity]
    pattern: re.Pattern
    tokens: dict[str, Enum]
    case_sensitive: bool = False

    def lookup(self, token: str) -> Enum | None:
        """Unit for a captured token, or None if the table does not know it."""
        if not self.case_sensitive:
            token = token.lower()
        return self.tokens.get(token)


GRAMMARS: dict[QuantityKind, UnitGrammar] = {
    QuantityKind.TEMPERATURE: UnitGrammar(Temperature, TEMPERATURE_PATTERN, TEMPERATURE_TOKENS),
    QuantityKind.VOLUME: UnitGrammar(Volume, VOLUME_PATTERN, VOLUME_TOKENS),
    QuantityKind.MASS: UnitGrammar(Mass, MASS_PATTERN, MASS_TOKENS, case_sensitive=True),
}


def parse_number(text: str) -> float:
    """
    Parse a base-10 floating point number.

    Surrounding whitespace is accepted; digit-group underscores are not.

    Raises:
        NumericParseError: If text is not a number
    """
    if "_" in text:
        raise NumericParseError(text)
    try:
        return float(text)
    except ValueError as e:
        raise NumericParseError(text) from e


def _parse(text: str, grammar: UnitGrammar) -> Quantity:
    quantity = grammar.quantity

    if text == "":
        return quantity.zero()

    match = grammar.pattern.search(text)
    if match:
        mantissa, token = match.groups()
        unit = grammar.lookup(token)
        if unit is not None:
            return quantity.from_unit(parse_number(mantissa), unit)

    # Bare number, or a token the table does not know
    return quantity.from_unit(parse_number(text), quantity.canonical_unit)


def parse_temperature(text: str) -> Temperature:
    """
    Parse a temperature such as "20C", "68 F" or "293.15k".

    A plain number is Celsius; an empty string is 0 °C.

    Raises:
        NumericParseError: If the numeric part cannot be parsed
    """
    return _parse(text, GRAMMARS[QuantityKind.TEMPERATURE])


def parse_volume(text: str) -> Volume:
    """
    Parse a volume such as "5gal", "330 ml" or "2 cm3".

    A plain number is litres; an empty string is 0 L.

    Raises:
        NumericParseError: If the numeric part cannot be parsed
    """
    return _parse(text, GRAMMARS[QuantityKind.VOLUME])


def parse_mass(text: str) -> Mass:
    """
    Parse a mass such as "2.5kg", "28 g" or "1T".

    A plain number is grams; an empty string is 0 g. Unit tokens are
    case-sensitive: "T" is a metric tonne, "t" is not recognised.

    Raises:
        NumericParseError: If the numeric part cannot be parsed
    """
    return _parse(text, GRAMMARS[QuantityKind.MASS])


def resolve_kind(kind: QuantityKind | str) -> QuantityKind:
    """
    Resolve a quantity kind name ("volume", "Mass", ...).

    Raises:
        UnitConversionError: If the kind is unknown
    """
    if isinstance(kind, QuantityKind):
        return kind
    try:
        return QuantityKind(kind.strip().lower())
    except ValueError as e:
        choices = ", ".join(k.value for k in QuantityKind)
        raise UnitConversionError(
            f"Unknown quantity kind: {kind} (expected one of: {choices})"
        ) from e


def parse_quantity(text: str, kind: QuantityKind | str) -> Quantity:
    """
    Parse a measurement string as a quantity of the given kind.

    Args:
        text: Measurement string, e.g. "5 gal"
        kind: "temperature", "volume" or "mass"

    Returns:
        Temperature, Volume or Mass

    Raises:
        NumericParseError: If the numeric part cannot be parsed
        UnitConversionError: If the kind is unknown
    """
    return _parse(text, GRAMMARS[resolve_kind(kind)])
