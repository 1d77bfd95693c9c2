"""Optional query parameters.

Parameters are built through the factory functions below rather than from
raw name/value pairs, so only names the service understands can be produced.
"""

from enum import Enum
from typing import Iterable, NamedTuple


class OptionalParameter(NamedTuple):
    """An immutable (name, value) query parameter."""

    name: str
    value: str


class Units(str, Enum):
    """Units of measurement understood by the service."""

    STANDARD = "standard"
    METRIC = "metric"
    IMPERIAL = "imperial"


def exclude_sections(sections: Iterable[str]) -> OptionalParameter:
    """Exclude response sections, e.g. ``["minutely", "alerts"]``.

    Section names are joined with commas and not checked locally.
    """
    return OptionalParameter("excludes", ",".join(sections))


def units(kind: Units | str) -> OptionalParameter:
    """Select the units system.

    Raises:
        ValueError: If ``kind`` is not standard, metric or imperial
    """
    return OptionalParameter("units", Units(kind).value)


def standard_units() -> OptionalParameter:
    return units(Units.STANDARD)


def metric_units() -> OptionalParameter:
    return units(Units.METRIC)


def imperial_units() -> OptionalParameter:
    return units(Units.IMPERIAL)


def language(code: str) -> OptionalParameter:
    """Request descriptions in the given language, passed through verbatim."""
    return OptionalParameter("lang", code)
