"""
MCP tool definitions for the brewing calculator.

The tool bodies are plain functions so they can be called and tested
without a server; register_tools() exposes them with configured precision
and converts library errors into structured error results.
"""

import logging
from typing import Any, Callable

from fastmcp import FastMCP

from brewing_units.exceptions import BrewingUnitsError
from brewing_units.matching import resolve_unit
from brewing_units.parser import GRAMMARS, parse_quantity, resolve_kind
from brewing_units.quantities import QUANTITY_TYPES, QuantityKind

from mcp_brewcalc.config import get_config

logger = logging.getLogger(__name__)


def parse_measurement(
    value: str,
    kind: str,
    unit: str | None = None,
    precision: int = 3,
) -> dict:
    """
    Parse a measurement string and present it in a unit.

    Args:
        value: Measurement string, e.g. "5 gal"
        kind: temperature, volume or mass
        unit: Unit to present the result in (default: the kind's base unit)
        precision: Decimal places to round to

    Returns:
        Base-unit value plus the value in the requested unit
    """
    quantity = parse_quantity(value, kind)
    target = quantity.canonical_unit
    if unit:
        target = resolve_unit(unit, quantity.unit_type)

    return {
        "input": value,
        "kind": quantity.kind.value,
        "canonical_unit": quantity.canonical_unit.value,
        "canonical_value": round(quantity.value, precision),
        "unit": target.value,
        "value": round(quantity.to(target), precision),
    }


def convert_measurement(
    value: float,
    from_unit: str,
    to_unit: str,
    kind: str,
    precision: int = 3,
) -> dict:
    """
    Convert a number between two units of the same kind.

    Args:
        value: Amount in from_unit
        from_unit: Source unit name, e.g. "gallons"
        to_unit: Target unit name, e.g. "litres"
        kind: temperature, volume or mass
        precision: Decimal places to round to

    Returns:
        The converted value with resolved unit identifiers
    """
    quantity_type = QUANTITY_TYPES[resolve_kind(kind)]
    source = resolve_unit(from_unit, quantity_type.unit_type)
    target = resolve_unit(to_unit, quantity_type.unit_type)
    quantity = quantity_type.from_unit(value, source)

    return {
        "kind": quantity.kind.value,
        "input": value,
        "from_unit": source.value,
        "to_unit": target.value,
        "value": round(quantity.to(target), precision),
    }


def list_units(kind: str | None = None) -> dict:
    """
    Describe the unit tokens recognised when parsing.

    Args:
        kind: Limit to one kind (default: all kinds)

    Returns:
        Mapping of kind to its default unit, tokens and unit identifiers
    """
    kinds = [resolve_kind(kind)] if kind else list(QuantityKind)

    result = {}
    for k in kinds:
        grammar = GRAMMARS[k]
        result[k.value] = {
            "default_unit": grammar.quantity.canonical_unit.value,
            "tokens": list(grammar.tokens),
            "case_sensitive": grammar.case_sensitive,
            "units": [u.value for u in grammar.quantity.unit_type],
        }
    return result


def run_tool(
    operation: Callable[..., dict],
    *args: Any,
    configured: bool = False,
    **kwargs: Any,
) -> dict:
    """
    Run a tool body, reporting library errors as {"error": message}.

    Args:
        operation: Tool body to call
        *args, **kwargs: Passed to the tool body
        configured: Pass the configured precision to the tool body

    Returns:
        The tool result, or an error result
    """
    try:
        if configured:
            kwargs["precision"] = get_config().precision
        return operation(*args, **kwargs)
    except BrewingUnitsError as e:
        logger.warning("%s failed: %s", operation.__name__, e)
        return {"error": str(e)}


def register_tools(mcp: FastMCP) -> None:
    """Register all brewing calculator MCP tools."""

    @mcp.tool(name="parse_measurement")
    def parse_measurement_tool(
        value: str,
        kind: str,
        unit: str | None = None,
    ) -> dict:
        """
        Parse a free-form measurement such as "5 gal", "20C" or "2.5kg".

        A plain number is read in the kind's base unit (Celsius, litres,
        grams) and an empty string is zero. Volume and temperature units are
        case-insensitive; mass units are case-sensitive ("T" is a tonne).

        Args:
            value: Measurement string
            kind: temperature, volume or mass
            unit: Unit to present the result in, e.g. "gallons" (optional)

        Returns:
            Parsed value in the base unit and in the requested unit
        """
        return run_tool(parse_measurement, value, kind, unit, configured=True)

    @mcp.tool(name="convert_measurement")
    def convert_measurement_tool(
        value: float,
        from_unit: str,
        to_unit: str,
        kind: str,
    ) -> dict:
        """
        Convert a number between units, e.g. 5 gallons to litres.

        Args:
            value: Amount to convert
            from_unit: Source unit name
            to_unit: Target unit name
            kind: temperature, volume or mass

        Returns:
            Converted value
        """
        return run_tool(
            convert_measurement,
            value,
            from_unit,
            to_unit,
            kind,
            configured=True,
        )

    @mcp.tool(name="list_units")
    def list_units_tool(kind: str | None = None) -> dict:
        """
        List the unit tokens recognised by parse_measurement.

        Args:
            kind: temperature, volume or mass (optional, default all)

        Returns:
            Default unit, tokens and unit identifiers per kind
        """
        return run_tool(list_units, kind)
