"""Typed parsing of raw form input into :class:`ScenarioParameters`.

Form values arrive as strings or loosely typed numbers.  ``parse_scenario``
converts them, checks every field against :data:`claiming_planner.config.BOUNDS`
and returns either a scenario or the complete list of problems, so the user
can fix all fields at once.  Out-of-range input is rejected, never clamped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Iterable, List, Mapping, Optional

from ..config import BOUNDS, DEFAULTS

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised for malformed configuration such as unparseable claiming-age text."""


@dataclass(frozen=True)
class ValidationError:
    """One rejected input field."""

    field: str
    value: Any
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message} (got {self.value!r})"


@dataclass(frozen=True)
class ScenarioParameters:
    birth_year: int
    birth_month: int = 1
    interest_rate_pct: float = 0.0
    cola_pct: float = 0.0
    pia: float = 1000.0
    arrears: bool = False
    paydown_balance: float = 0.0
    borrow_rate_pct: float = 0.0
    monthly_spend: float = 0.0
    age_at_death: float = 100

    @property
    def birth_month_0based(self) -> int:
        return self.birth_month - 1


@dataclass
class ParseResult:
    scenario: Optional[ScenarioParameters] = None
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


_TRUE = {"1", "true", "yes", "on", "paid"}
_FALSE = {"0", "false", "no", "off", "due", ""}


def _to_number(raw: Any, name: str, errors: List[ValidationError], integer: bool = False):
    if isinstance(raw, bool):
        errors.append(ValidationError(name, raw, "expected a number"))
        return None
    try:
        value = float(str(raw).strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError):
        errors.append(ValidationError(name, raw, "expected a number"))
        return None
    if not math.isfinite(value):
        errors.append(ValidationError(name, raw, "expected a finite number"))
        return None
    if integer:
        if not value.is_integer():
            errors.append(ValidationError(name, raw, "expected a whole number"))
            return None
        return int(value)
    return value


def _check_range(name: str, value, errors: List[ValidationError]) -> None:
    low, high = BOUNDS[name]
    if value < low or value > high:
        errors.append(ValidationError(name, value, f"expected a value between {low} and {high}"))


def _to_bool(raw: Any, name: str, errors: List[ValidationError]) -> Optional[bool]:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str) and raw.strip().lower() in _TRUE | _FALSE:
        return raw.strip().lower() in _TRUE
    errors.append(ValidationError(name, raw, "expected true/false"))
    return None


_NUMERIC_FIELDS = [
    ("birth_year", True),
    ("birth_month", True),
    ("age_at_death", False),
    ("interest_rate_pct", False),
    ("cola_pct", False),
    ("pia", False),
    ("paydown_balance", False),
    ("borrow_rate_pct", False),
    ("monthly_spend", False),
]


def parse_scenario(raw: Mapping[str, Any]) -> ParseResult:
    """Convert and validate raw input.

    Missing keys fall back to :data:`DEFAULTS`.  Every field is checked even
    after a failure; the scenario is only built when no error was found.
    """
    errors: List[ValidationError] = []
    values = {}
    for name, integer in _NUMERIC_FIELDS:
        value = _to_number(raw.get(name, DEFAULTS[name]), name, errors, integer=integer)
        if value is None:
            continue
        _check_range(name, value, errors)
        values[name] = value
    arrears = _to_bool(raw.get("arrears", DEFAULTS["arrears"]), "arrears", errors)

    if errors:
        logger.warning("Rejected scenario input: %s", "; ".join(str(e) for e in errors))
        return ParseResult(errors=errors)
    return ParseResult(scenario=ScenarioParameters(arrears=arrears, **values))


def validate_claiming_ages(ages: Iterable[float]) -> List[ValidationError]:
    """Check a parsed claiming-age list: non-empty, each age within 62..70."""
    ages = list(ages)
    if not ages:
        return [ValidationError("claiming_ages", ages, "at least one claiming age is required")]
    errors = []
    low, high = BOUNDS["claiming_age"]
    for idx, age in enumerate(ages):
        if not math.isfinite(age):
            errors.append(ValidationError(f"claiming_ages[{idx}]", age, "expected a finite number"))
            continue
        # ages like 62+5/12 carry float noise; compare at month resolution
        months = round(age * 12)
        if months < low * 12 or months > high * 12:
            errors.append(ValidationError(f"claiming_ages[{idx}]", age, f"expected an age between {low:g} and {high:g}"))
    return errors


__all__ = [
    "ConfigurationError",
    "ValidationError",
    "ScenarioParameters",
    "ParseResult",
    "parse_scenario",
    "validate_claiming_ages",
]
