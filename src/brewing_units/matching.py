"""
Unit-name resolution with fuzzy suggestions.

Resolves human-written unit names ("litres", "US gallons", "°F") to unit
enums. Unknown names are reported with close candidates found by RapidFuzz.
"""

import re
from enum import Enum
from typing import TypeVar

from rapidfuzz import fuzz, process

from brewing_units.exceptions import UnitConversionError


E = TypeVar("E", bound=Enum)

_SEPARATORS = re.compile(r"[-_\s]+")
_DEGREE_PREFIX = re.compile(r"^(degrees|degree|deg|°)\s*")


def match_string(
    query: str,
    candidates: list[str],
    threshold: float = 0.7,
    limit: int = 5,
) -> list[tuple[str, float]]:
    """
    Match a query string against candidates using fuzzy matching.

    Uses token_sort_ratio which handles word order variations well,
    making it suitable for unit names like "gallons US" vs "US gallons".

    Args:
        query: The string to search for
        candidates: List of strings to match against
        threshold: Minimum match score (0.0 to 1.0), default 0.7
        limit: Maximum number of results to return

    Returns:
        List of (match, confidence) tuples above threshold, sorted by confidence

    Example:
        >>> match_string("galons", ["gallons", "grains", "grams"])
        [("gallons", 0.92...)]
    """
    if not candidates:
        return []

    if not query or not query.strip():
        return []

    results = process.extract(
        query,
        candidates,
        scorer=fuzz.token_sort_ratio,
        limit=limit,
    )

    # Convert scores from 0-100 to 0-1 and filter by threshold
    return [
        (match, score / 100)
        for match, score, _ in results
        if score / 100 >= threshold
    ]


def normalise_unit_name(name: str) -> str:
    """
    Normalise a unit name for lookup.

    - Converts to lowercase
    - Folds the micro sign (U+00B5) into Greek mu
    - Unifies separators (hyphens, underscores, runs of whitespace)
    - Removes a degree prefix ("degrees", "deg", "°")
    - Strips a trailing full stop ("lbs.")

    Args:
        name: Raw unit name

    Returns:
        Normalised name
    """
    normalised = name.strip().lower().replace("µ", "μ")
    normalised = normalised.rstrip(".")
    normalised = _SEPARATORS.sub(" ", normalised).strip()
    return _DEGREE_PREFIX.sub("", normalised)


def unit_kind(unit_type: type[Enum]) -> str:
    """Human label for a unit enum, e.g. VolumeUnit -> "volume"."""
    return unit_type.__name__.removesuffix("Unit").lower()


def suggest_unit_names(
    name: str,
    unit_type: type[Enum],
    limit: int = 3,
) -> list[str]:
    """
    Suggest known unit names close to an unrecognised one.

    Only spelled-out names are offered; one- and two-letter tokens
    match almost anything.

    Args:
        name: Unrecognised unit name
        unit_type: Unit enum to search (MassUnit, VolumeUnit, ...)
        limit: Maximum number of suggestions

    Returns:
        Candidate names, best first
    """
    candidates = [alias for alias in unit_type.aliases() if len(alias) > 2]
    matches = match_string(
        normalise_unit_name(name),
        candidates,
        threshold=0.6,
        limit=limit,
    )
    return [match for match, _ in matches]


def resolve_unit(name: str | Enum, unit_type: type[E]) -> E:
    """
    Resolve a unit name to a member of unit_type.

    Accepts enum values, parser tokens and spelled-out names in British
    or American spelling, singular or plural. Matching is case-insensitive.

    Args:
        name: Unit name or enum member
        unit_type: Target unit enum

    Returns:
        The matching enum member

    Raises:
        UnitConversionError: If the name is not a known unit of that kind
    """
    if isinstance(name, unit_type):
        return name
    if isinstance(name, Enum):
        name = name.value

    unit = unit_type.aliases().get(normalise_unit_name(str(name)))
    if unit is not None:
        return unit

    message = f"Unknown {unit_kind(unit_type)} unit: {name}"
    suggestions = suggest_unit_names(str(name), unit_type)
    if suggestions:
        message += f" (did you mean: {', '.join(suggestions)}?)"
    raise UnitConversionError(message)
