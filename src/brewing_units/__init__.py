"""
brewing-units: Measurement parsing and unit conversion for brewing tools.

Turns human-entered strings such as "5 gal", "20C" or "2.5kg" into typed,
immutable quantities, and converts them between units.
"""

from brewing_units.quantities import (
    QuantityKind,
    Quantity,
    Temperature,
    Volume,
    Mass,
)
from brewing_units.parser import (
    parse_temperature,
    parse_volume,
    parse_mass,
    parse_quantity,
)
from brewing_units.units import (
    MassUnit,
    VolumeUnit,
    TemperatureUnit,
    convert_mass,
    convert_volume,
    convert_temperature,
)
from brewing_units.matching import (
    resolve_unit,
    suggest_unit_names,
)
from brewing_units.exceptions import (
    BrewingUnitsError,
    NumericParseError,
    UnitConversionError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    # Quantities
    "QuantityKind",
    "Quantity",
    "Temperature",
    "Volume",
    "Mass",
    # Parsing
    "parse_temperature",
    "parse_volume",
    "parse_mass",
    "parse_quantity",
    # Units
    "MassUnit",
    "VolumeUnit",
    "TemperatureUnit",
    "convert_mass",
    "convert_volume",
    "convert_temperature",
    # Matching
    "resolve_unit",
    "suggest_unit_names",
    # Exceptions
    "BrewingUnitsError",
    "NumericParseError",
    "UnitConversionError",
    "ConfigurationError",
]
