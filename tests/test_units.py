"""
Tests for brewing-units unit conversion.
"""

import pytest
from brewing_units.units import (
    convert_mass,
    convert_volume,
    convert_temperature,
    lb_to_kg,
    kg_to_lb,
    oz_to_g,
    g_to_oz,
    gal_to_l,
    l_to_gal,
    f_to_c,
    c_to_f,
    MassUnit,
    VolumeUnit,
    TemperatureUnit,
)
from brewing_units.exceptions import UnitConversionError


class TestMassConversion:
    """Tests for mass unit conversion."""

    def test_kg_to_g(self):
        assert convert_mass(1.0, MassUnit.KG, MassUnit.G) == 1000.0

    def test_g_to_kg(self):
        assert convert_mass(1000.0, MassUnit.G, MassUnit.KG) == 1.0

    def test_lb_to_kg(self):
        result = convert_mass(1.0, MassUnit.LB, MassUnit.KG)
        assert abs(result - 0.45359237) < 0.0001

    def test_oz_to_g(self):
        result = convert_mass(1.0, MassUnit.OZ, MassUnit.G)
        assert abs(result - 28.3495) < 0.001

    def test_convenience_lb_to_kg(self):
        result = lb_to_kg(1.0)
        assert abs(result - 0.45359237) < 0.0001

    def test_convenience_kg_to_lb(self):
        result = kg_to_lb(1.0)
        assert abs(result - 2.20462) < 0.001

    def test_convenience_oz_to_g(self):
        result = oz_to_g(1.0)
        assert abs(result - 28.3495) < 0.001

    def test_convenience_g_to_oz(self):
        result = g_to_oz(28.349523125)
        assert abs(result - 1.0) < 0.0001

    def test_string_units(self):
        result = convert_mass(1.0, "kg", "g")
        assert result == 1000.0

    def test_spelled_out_units(self):
        result = convert_mass(2.0, "pounds", "ounces")
        assert abs(result - 32.0) < 0.0001

    def test_invalid_unit(self):
        with pytest.raises(UnitConversionError):
            convert_mass(1.0, "invalid", MassUnit.G)


class TestVolumeConversion:
    """Tests for volume unit conversion."""

    def test_l_to_ml(self):
        assert convert_volume(1.0, VolumeUnit.L, VolumeUnit.ML) == 1000.0

    def test_ml_equals_cm3(self):
        assert convert_volume(1.0, VolumeUnit.ML, VolumeUnit.CM3) == 1.0

    def test_gal_to_l(self):
        result = convert_volume(1.0, VolumeUnit.GAL, VolumeUnit.L)
        assert abs(result - 3.78541) < 0.001

    def test_cubic_foot_to_l(self):
        result = convert_volume(1.0, VolumeUnit.FT3, VolumeUnit.L)
        assert abs(result - 28.3168) < 0.001

    def test_cubic_yard_to_cubic_feet(self):
        result = convert_volume(1.0, VolumeUnit.YD3, VolumeUnit.FT3)
        assert abs(result - 27.0) < 0.0001

    def test_gallon_to_cubic_inches(self):
        result = convert_volume(1.0, VolumeUnit.GAL, VolumeUnit.IN3)
        assert abs(result - 231.0) < 0.0001

    def test_drops_per_ml(self):
        assert convert_volume(1.0, VolumeUnit.ML, VolumeUnit.DROP) == pytest.approx(20.0)

    def test_convenience_gal_to_l(self):
        result = gal_to_l(5.0)
        assert abs(result - 18.927) < 0.01

    def test_convenience_l_to_gal(self):
        result = l_to_gal(18.927)
        assert abs(result - 5.0) < 0.01

    def test_invalid_unit(self):
        with pytest.raises(UnitConversionError):
            convert_volume(1.0, VolumeUnit.L, "hogshead")


class TestTemperatureConversion:
    """Tests for temperature unit conversion."""

    def test_f_to_c(self):
        result = convert_temperature(32.0, TemperatureUnit.F, TemperatureUnit.C)
        assert abs(result - 0.0) < 0.01

    def test_c_to_f(self):
        result = convert_temperature(100.0, TemperatureUnit.C, TemperatureUnit.F)
        assert abs(result - 212.0) < 0.01

    def test_c_to_k(self):
        result = convert_temperature(0.0, TemperatureUnit.C, TemperatureUnit.K)
        assert abs(result - 273.15) < 0.01

    def test_k_to_r(self):
        result = convert_temperature(100.0, TemperatureUnit.K, TemperatureUnit.R)
        assert abs(result - 180.0) < 0.01

    def test_r_to_f(self):
        result = convert_temperature(491.67, TemperatureUnit.R, TemperatureUnit.F)
        assert abs(result - 32.0) < 0.01

    def test_same_unit(self):
        assert convert_temperature(66.6, "c", "celsius") == 66.6

    def test_convenience_f_to_c(self):
        result = f_to_c(68.0)
        assert abs(result - 20.0) < 0.01

    def test_convenience_c_to_f(self):
        result = c_to_f(20.0)
        assert abs(result - 68.0) < 0.01

    def test_degree_symbol(self):
        result = convert_temperature(152.0, "°F", "°C")
        assert abs(result - 66.667) < 0.01
