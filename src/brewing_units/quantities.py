"""
Typed physical quantities for brewing measurements.

Each quantity is a frozen Pydantic model holding one value in its kind's
canonical unit (Celsius, litres, grams). Other units are read-only views
computed on access.
"""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from brewing_units.units import (
    MassUnit,
    TemperatureUnit,
    VolumeUnit,
    convert_mass,
    convert_temperature,
    convert_volume,
)


class QuantityKind(str, Enum):
    """Kind of physical quantity."""

    TEMPERATURE = "temperature"
    VOLUME = "volume"
    MASS = "mass"


class Quantity(BaseModel):
    """
    A measurement of one kind, stored in the kind's canonical unit.

    Subclasses declare the canonical field and unit, and how to convert
    between their units.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[QuantityKind]
    unit_type: ClassVar[type[Enum]]
    canonical_unit: ClassVar[Enum]
    canonical_field: ClassVar[str]

    @classmethod
    def convert_value(cls, value: float, from_unit, to_unit) -> float:
        """Convert a value between two units of this kind; set by each subclass."""
        raise NotImplementedError

    @classmethod
    def from_unit(cls, value: float, unit) -> "Quantity":
        """
        Create a quantity from a value expressed in any unit of this kind.

        Args:
            value: The amount
            unit: Unit enum member or unit name

        Returns:
            New quantity in the canonical unit
        """
        canonical = cls.convert_value(value, unit, cls.canonical_unit)
        return cls(**{cls.canonical_field: canonical})

    @classmethod
    def zero(cls) -> "Quantity":
        """Zero in the canonical unit."""
        return cls(**{cls.canonical_field: 0.0})

    @property
    def value(self) -> float:
        """Value in the canonical unit."""
        return getattr(self, self.canonical_field)

    def to(self, unit) -> float:
        """
        Express this quantity in another unit of the same kind.

        Args:
            unit: Unit enum member or unit name ("gallons", "°F", ...)

        Returns:
            The value in that unit

        Raises:
            UnitConversionError: If the unit is not of this kind
        """
        return self.convert_value(self.value, self.canonical_unit, unit)


class Temperature(Quantity):
    """Temperature, stored in degrees Celsius."""

    kind: ClassVar[QuantityKind] = QuantityKind.TEMPERATURE
    unit_type: ClassVar[type[Enum]] = TemperatureUnit
    canonical_unit: ClassVar[Enum] = TemperatureUnit.C
    canonical_field: ClassVar[str] = "celsius"

    celsius: float = Field(..., description="Temperature in degrees Celsius")

    @classmethod
    def convert_value(cls, value: float, from_unit, to_unit) -> float:
        return convert_temperature(value, from_unit, to_unit)

    def as_celsius(self) -> float:
        return self.celsius

    def as_fahrenheit(self) -> float:
        return self.to(TemperatureUnit.F)

    def as_kelvin(self) -> float:
        return self.to(TemperatureUnit.K)

    def as_rankine(self) -> float:
        return self.to(TemperatureUnit.R)


class Volume(Quantity):
    """Volume, stored in litres. Customary units are US liquid measures."""

    kind: ClassVar[QuantityKind] = QuantityKind.VOLUME
    unit_type: ClassVar[type[Enum]] = VolumeUnit
    canonical_unit: ClassVar[Enum] = VolumeUnit.L
    canonical_field: ClassVar[str] = "litres"

    litres: float = Field(..., description="Volume in litres")

    @classmethod
    def convert_value(cls, value: float, from_unit, to_unit) -> float:
        return convert_volume(value, from_unit, to_unit)

    def as_litres(self) -> float:
        return self.litres

    def as_millilitres(self) -> float:
        return self.to(VolumeUnit.ML)

    def as_cubic_centimetres(self) -> float:
        return self.to(VolumeUnit.CM3)

    def as_cubic_metres(self) -> float:
        return self.to(VolumeUnit.M3)

    def as_cubic_inches(self) -> float:
        return self.to(VolumeUnit.IN3)

    def as_cubic_feet(self) -> float:
        return self.to(VolumeUnit.FT3)

    def as_cubic_yards(self) -> float:
        return self.to(VolumeUnit.YD3)

    def as_gallons(self) -> float:
        return self.to(VolumeUnit.GAL)

    def as_pints(self) -> float:
        return self.to(VolumeUnit.PT)

    def as_cups(self) -> float:
        return self.to(VolumeUnit.CUP)

    def as_teaspoons(self) -> float:
        return self.to(VolumeUnit.TSP)

    def as_drams(self) -> float:
        return self.to(VolumeUnit.DR)

    def as_drops(self) -> float:
        return self.to(VolumeUnit.DROP)


class Mass(Quantity):
    """Mass, stored in grams."""

    kind: ClassVar[QuantityKind] = QuantityKind.MASS
    unit_type: ClassVar[type[Enum]] = MassUnit
    canonical_unit: ClassVar[Enum] = MassUnit.G
    canonical_field: ClassVar[str] = "grams"

    grams: float = Field(..., description="Mass in grams")

    @classmethod
    def convert_value(cls, value: float, from_unit, to_unit) -> float:
        return convert_mass(value, from_unit, to_unit)

    def as_micrograms(self) -> float:
        return self.to(MassUnit.UG)

    def as_milligrams(self) -> float:
        return self.to(MassUnit.MG)

    def as_carats(self) -> float:
        return self.to(MassUnit.CT)

    def as_grams(self) -> float:
        return self.grams

    def as_kilograms(self) -> float:
        return self.to(MassUnit.KG)

    def as_tonnes(self) -> float:
        return self.to(MassUnit.T)

    def as_grains(self) -> float:
        return self.to(MassUnit.GR)

    def as_pennyweights(self) -> float:
        return self.to(MassUnit.DWT)

    def as_ounces(self) -> float:
        return self.to(MassUnit.OZ)

    def as_pounds(self) -> float:
        return self.to(MassUnit.LB)

    def as_stones(self) -> float:
        return self.to(MassUnit.ST)


QUANTITY_TYPES: dict[QuantityKind, type[Quantity]] = {
    QuantityKind.TEMPERATURE: Temperature,
    QuantityKind.VOLUME: Volume,
    QuantityKind.MASS: Mass,
}
