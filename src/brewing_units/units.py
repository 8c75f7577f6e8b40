"""
Unit definitions and conversion utilities for brewing measurements.

Supports mass, volume and temperature unit conversions.
All internal representations use metric base units:
- Mass: grams
- Volume: litres
- Temperature: Celsius
"""

from enum import Enum

from brewing_units.matching import resolve_unit


class MassUnit(str, Enum):
    """Mass/weight units."""

    UG = "ug"
    MG = "mg"
    CT = "ct"  # metric carat
    G = "g"
    KG = "kg"
    T = "t"  # metric tonne
    GR = "gr"  # grain
    DWT = "dwt"  # troy pennyweight
    OZ = "oz"
    LB = "lb"
    ST = "st"

    @classmethod
    def aliases(cls) -> dict[str, "MassUnit"]:
        return _MASS_ALIASES


class VolumeUnit(str, Enum):
    """Volume units. Customary units are US liquid measures."""

    L = "l"
    ML = "ml"
    CM3 = "cm3"
    M3 = "m3"
    IN3 = "in3"
    FT3 = "ft3"
    YD3 = "yd3"
    GAL = "gal"
    PT = "pt"
    CUP = "cup"
    TSP = "tsp"
    DR = "dr"  # fluid dram
    DROP = "drop"

    @classmethod
    def aliases(cls) -> dict[str, "VolumeUnit"]:
        return _VOLUME_ALIASES


class TemperatureUnit(str, Enum):
    """Temperature units."""

    C = "c"
    F = "f"
    K = "k"
    R = "r"

    @classmethod
    def aliases(cls) -> dict[str, "TemperatureUnit"]:
        return _TEMPERATURE_ALIASES


# Conversion constants to base units
MASS_TO_GRAMS: dict[MassUnit, float] = {
    MassUnit.UG: 0.000001,
    MassUnit.MG: 0.001,
    MassUnit.CT: 0.2,
    MassUnit.G: 1.0,
    MassUnit.KG: 1000.0,
    MassUnit.T: 1000000.0,
    MassUnit.GR: 0.06479891,
    MassUnit.DWT: 1.55517384,
    MassUnit.OZ: 28.349523125,
    MassUnit.LB: 453.59237,
    MassUnit.ST: 6350.29318,
}

VOLUME_TO_LITRES: dict[VolumeUnit, float] = {
    VolumeUnit.L: 1.0,
    VolumeUnit.ML: 0.001,
    VolumeUnit.CM3: 0.001,
    VolumeUnit.M3: 1000.0,
    VolumeUnit.IN3: 0.016387064,
    VolumeUnit.FT3: 28.316846592,
    VolumeUnit.YD3: 764.554857984,
    VolumeUnit.GAL: 3.785411784,
    VolumeUnit.PT: 0.473176473,
    VolumeUnit.CUP: 0.2365882365,
    VolumeUnit.TSP: 0.00492892159375,
    VolumeUnit.DR: 0.0036966911953125,
    VolumeUnit.DROP: 0.00005,  # metric drop, 0.05 ml
}


def _aliases(table: dict[object, list[str]]) -> dict:
    return {name: unit for unit, names in table.items() for name in names}


# Spelled-out names, keyed in the form produced by normalise_unit_name()
_MASS_ALIASES: dict[str, MassUnit] = _aliases({
    MassUnit.UG: ["ug", "μg", "mcg", "microgram", "micrograms", "microgramme", "microgrammes"],
    MassUnit.MG: ["mg", "milligram", "milligrams", "milligramme", "milligrammes"],
    MassUnit.CT: ["ct", "carat", "carats"],
    MassUnit.G: ["g", "gm", "gram", "grams", "gramme", "grammes"],
    MassUnit.KG: ["kg", "kilo", "kilos", "kilogram", "kilograms", "kilogramme", "kilogrammes"],
    MassUnit.T: ["t", "tonne", "tonnes", "metric ton", "metric tons"],
    MassUnit.GR: ["gr", "grain", "grains"],
    MassUnit.DWT: ["dwt", "pennyweight", "pennyweights"],
    MassUnit.OZ: ["oz", "ounce", "ounces"],
    MassUnit.LB: ["lb", "lbs", "pound", "pounds"],
    MassUnit.ST: ["st", "stone", "stones"],
})

_VOLUME_ALIASES: dict[str, VolumeUnit] = _aliases({
    VolumeUnit.L: ["l", "litre", "litres", "liter", "liters"],
    VolumeUnit.ML: ["ml", "millilitre", "millilitres", "milliliter", "milliliters"],
    VolumeUnit.CM3: ["cm3", "cc", "cubic centimetre", "cubic centimetres",
                     "cubic centimeter", "cubic centimeters"],
    VolumeUnit.M3: ["m3", "cubic metre", "cubic metres", "cubic meter", "cubic meters"],
    VolumeUnit.IN3: ["in3", "cubic inch", "cubic inches"],
    VolumeUnit.FT3: ["ft3", "cubic foot", "cubic feet"],
    VolumeUnit.YD3: ["yd3", "cubic yard", "cubic yards"],
    VolumeUnit.GAL: ["gal", "gallon", "gallons", "us gallon", "us gallons"],
    VolumeUnit.PT: ["pt", "p", "ʒ", "pint", "pints", "us pint", "us pints"],
    VolumeUnit.CUP: ["cup", "cups"],
    VolumeUnit.TSP: ["tsp", "teaspoon", "teaspoons"],
    VolumeUnit.DR: ["dr", "dram", "drams", "fluid dram", "fluid drams"],
    VolumeUnit.DROP: ["drop", "drops", "μl"],
})

_TEMPERATURE_ALIASES: dict[str, TemperatureUnit] = _aliases({
    TemperatureUnit.C: ["c", "celsius", "centigrade"],
    TemperatureUnit.F: ["f", "fahrenheit"],
    TemperatureUnit.K: ["k", "kelvin", "kelvins"],
    TemperatureUnit.R: ["r", "rankine"],
})


def convert_mass(
    value: float,
    from_unit: MassUnit | str,
    to_unit: MassUnit | str,
) -> float:
    """
    Convert between mass units.

    Args:
        value: The value to convert
        from_unit: Source unit (enum member or unit name)
        to_unit: Target unit (enum member or unit name)

    Returns:
        Converted value

    Raises:
        UnitConversionError: If units are invalid
    """
    from_unit = resolve_unit(from_unit, MassUnit)
    to_unit = resolve_unit(to_unit, MassUnit)

    # Convert via grams as intermediate
    grams = value * MASS_TO_GRAMS[from_unit]
    return grams / MASS_TO_GRAMS[to_unit]


def convert_volume(
    value: float,
    from_unit: VolumeUnit | str,
    to_unit: VolumeUnit | str,
) -> float:
    """
    Convert between volume units.

    Args:
        value: The value to convert
        from_unit: Source unit (enum member or unit name)
        to_unit: Target unit (enum member or unit name)

    Returns:
        Converted value

    Raises:
        UnitConversionError: If units are invalid
    """
    from_unit = resolve_unit(from_unit, VolumeUnit)
    to_unit = resolve_unit(to_unit, VolumeUnit)

    # Convert via litres as intermediate
    litres = value * VOLUME_TO_LITRES[from_unit]
    return litres / VOLUME_TO_LITRES[to_unit]


def convert_temperature(
    value: float,
    from_unit: TemperatureUnit | str,
    to_unit: TemperatureUnit | str,
) -> float:
    """
    Convert between temperature units.

    Args:
        value: The value to convert
        from_unit: Source unit (enum member or unit name)
        to_unit: Target unit (enum member or unit name)

    Returns:
        Converted value

    Raises:
        UnitConversionError: If units are invalid
    """
    from_unit = resolve_unit(from_unit, TemperatureUnit)
    to_unit = resolve_unit(to_unit, TemperatureUnit)

    if from_unit == to_unit:
        return value

    # First convert to Celsius
    if from_unit == TemperatureUnit.F:
        celsius = (value - 32) * 5 / 9
    elif from_unit == TemperatureUnit.K:
        celsius = value - 273.15
    elif from_unit == TemperatureUnit.R:
        celsius = (value - 491.67) * 5 / 9
    else:
        celsius = value

    # Then convert to target
    if to_unit == TemperatureUnit.F:
        return celsius * 9 / 5 + 32
    elif to_unit == TemperatureUnit.K:
        return celsius + 273.15
    elif to_unit == TemperatureUnit.R:
        return (celsius + 273.15) * 9 / 5
    return celsius


# Convenience functions for common conversions
def lb_to_kg(lb: float) -> float:
    """Convert pounds to kilograms."""
    return convert_mass(lb, MassUnit.LB, MassUnit.KG)


def kg_to_lb(kg: float) -> float:
    """Convert kilograms to pounds."""
    return convert_mass(kg, MassUnit.KG, MassUnit.LB)


def oz_to_g(oz: float) -> float:
    """Convert ounces to grams."""
    return convert_mass(oz, MassUnit.OZ, MassUnit.G)


def g_to_oz(g: float) -> float:
    """Convert grams to ounces."""
    return convert_mass(g, MassUnit.G, MassUnit.OZ)


def gal_to_l(gal: float) -> float:
    """Convert US gallons to litres."""
    return convert_volume(gal, VolumeUnit.GAL, VolumeUnit.L)


def l_to_gal(litres: float) -> float:
    """Convert litres to US gallons."""
    return convert_volume(litres, VolumeUnit.L, VolumeUnit.GAL)


def f_to_c(f: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return convert_temperature(f, TemperatureUnit.F, TemperatureUnit.C)


def c_to_f(c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return convert_temperature(c, TemperatureUnit.C, TemperatureUnit.F)
