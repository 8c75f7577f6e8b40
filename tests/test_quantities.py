"""
Tests for brewing-units quantity models.
"""

import pytest
from brewing_units.quantities import (
    QUANTITY_TYPES,
    Mass,
    Quantity,
    QuantityKind,
    Temperature,
    Volume,
)
from brewing_units.units import MassUnit, TemperatureUnit, VolumeUnit
from brewing_units.exceptions import UnitConversionError


class TestTemperature:
    """Tests for the Temperature model."""

    def test_stored_in_celsius(self):
        temp = Temperature.from_unit(68.0, TemperatureUnit.F)
        assert temp.celsius == pytest.approx(20.0)

    def test_kelvin(self):
        assert Temperature(celsius=0.0).as_kelvin() == pytest.approx(273.15)

    def test_rankine(self):
        assert Temperature(celsius=0.0).as_rankine() == pytest.approx(491.67)

    def test_from_unit_name(self):
        temp = Temperature.from_unit(212.0, "fahrenheit")
        assert temp.as_celsius() == pytest.approx(100.0)

    def test_zero(self):
        assert Temperature.zero().celsius == 0.0


class TestVolume:
    """Tests for the Volume model."""

    def test_stored_in_litres(self):
        vol = Volume.from_unit(5.0, VolumeUnit.GAL)
        assert vol.litres == pytest.approx(18.92705892)

    def test_millilitres(self):
        assert Volume(litres=1.5).as_millilitres() == pytest.approx(1500.0)

    def test_pints_per_gallon(self):
        assert Volume.from_unit(1.0, VolumeUnit.GAL).as_pints() == pytest.approx(8.0)

    def test_teaspoons_per_cup(self):
        assert Volume.from_unit(1.0, VolumeUnit.CUP).as_teaspoons() == pytest.approx(48.0)

    def test_cubic_metre(self):
        assert Volume(litres=1000.0).as_cubic_metres() == pytest.approx(1.0)

    def test_to_by_name(self):
        assert Volume(litres=3.785411784).to("US gallons") == pytest.approx(1.0)

    def test_to_unknown_unit(self):
        with pytest.raises(UnitConversionError):
            Volume(litres=1.0).to("furlongs")

    def test_to_unit_of_other_kind(self):
        with pytest.raises(UnitConversionError):
            Volume(litres=1.0).to(MassUnit.KG)


class TestMass:
    """Tests for the Mass model."""

    def test_stored_in_grams(self):
        assert Mass.from_unit(1.0, MassUnit.LB).grams == pytest.approx(453.59237)

    def test_pounds_per_stone(self):
        assert Mass.from_unit(1.0, MassUnit.ST).as_pounds() == pytest.approx(14.0)

    def test_grains_per_pennyweight(self):
        assert Mass.from_unit(1.0, MassUnit.DWT).as_grains() == pytest.approx(24.0)

    def test_carats(self):
        assert Mass(grams=1.0).as_carats() == pytest.approx(5.0)

    def test_tonnes(self):
        assert Mass(grams=2500000.0).as_tonnes() == pytest.approx(2.5)


class TestQuantityValues:
    """Quantities are immutable values."""

    def test_immutable(self):
        vol = Volume(litres=19.0)
        with pytest.raises(Exception):  # Pydantic ValidationError
            vol.litres = 23.0

    def test_equal_by_value(self):
        assert Mass(grams=1000.0) == Mass.from_unit(1.0, MassUnit.KG)

    def test_hashable(self):
        assert len({Mass(grams=1.0), Mass(grams=1.0)}) == 1

    def test_kinds_differ(self):
        assert Volume(litres=1.0) != Mass(grams=1.0)

    def test_canonical_value(self):
        assert Temperature(celsius=20.0).value == 20.0

    def test_kind(self):
        assert Volume.zero().kind == QuantityKind.VOLUME

    def test_base_has_no_conversion(self):
        with pytest.raises(NotImplementedError):
            Quantity.convert_value(1.0, "l", "ml")

    def test_type_table(self):
        for kind, quantity_type in QUANTITY_TYPES.items():
            assert quantity_type.kind == kind
