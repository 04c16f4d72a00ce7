"""Report dispatcher: raw form input in, validated results out.

This is the boundary the presentation layer talks to.  Input problems come
back as :class:`ValidationError` values on the result so they can all be
shown at once; only programming errors (an unknown report type) raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..config import DEFAULTS, REPORT_TYPES
from .claiming_ages import parse_claiming_ages
from .optimizer import optimum_grid
from .schedule import BenefitScheduleCache, payment_table
from .validation import (
    ConfigurationError,
    ScenarioParameters,
    ValidationError,
    parse_scenario,
    validate_claiming_ages,
)
from .valuation import project_balances

logger = logging.getLogger(__name__)


@dataclass
class ReportResult:
    report_type: str
    scenario: Optional[ScenarioParameters] = None
    claiming_ages: List[float] = field(default_factory=list)
    data: Any = None
    errors: List[ValidationError] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return not self.errors


def read_claiming_ages(raw: Mapping[str, Any]) -> Tuple[List[float], List[ValidationError]]:
    """Claiming ages from ``raw`` (text or a list of numbers) and their problems."""
    value = raw.get("claiming_ages", DEFAULTS["claiming_ages"])
    if isinstance(value, str):
        try:
            ages = parse_claiming_ages(value)
        except ConfigurationError as exc:
            return [], [ValidationError("claiming_ages", value, str(exc))]
    else:
        try:
            ages = [float(a) for a in value]
        except (TypeError, ValueError):
            return [], [ValidationError("claiming_ages", value, "expected a list of ages")]
    return ages, validate_claiming_ages(ages)


def _payment_table(scenario: ScenarioParameters, ages: List[float], cache: BenefitScheduleCache):
    return payment_table(scenario.birth_year, scenario.birth_month, scenario.pia, cache=cache)


def _bank_balance(scenario: ScenarioParameters, ages: List[float], cache: BenefitScheduleCache):
    return project_balances(scenario, ages, cache=cache)


def _optimum_fv(scenario: ScenarioParameters, ages: List[float], cache: BenefitScheduleCache):
    return optimum_grid(
        "fv", scenario.birth_year, scenario.age_at_death, pia=scenario.pia,
        cola_pct=scenario.cola_pct, birth_month_0based=scenario.birth_month_0based, cache=cache,
    )


def _optimum_npv(scenario: ScenarioParameters, ages: List[float], cache: BenefitScheduleCache):
    return optimum_grid("npv", scenario.birth_year, scenario.age_at_death, pia=scenario.pia, cache=cache)


_REPORTS: Dict[str, Callable[[ScenarioParameters, List[float], BenefitScheduleCache], Any]] = {
    "payment_table": _payment_table,
    "bank_balance": _bank_balance,
    "optimum_fv": _optimum_fv,
    "optimum_npv": _optimum_npv,
}


def run_report(report_type: str, raw: Mapping[str, Any]) -> ReportResult:
    """Validate ``raw`` and build the requested report.

    Each call uses its own schedule cache, so concurrent sessions never share
    state.
    """
    if report_type not in _REPORTS:
        raise ConfigurationError(f"unknown report type '{report_type}', expected one of {sorted(REPORT_TYPES)}")

    started = time.perf_counter()
    parsed = parse_scenario(raw)
    errors = list(parsed.errors)
    ages: List[float] = []
    if report_type == "bank_balance":
        ages, age_errors = read_claiming_ages(raw)
        errors.extend(age_errors)
    if errors:
        logger.warning("Rejected %s input: %s", report_type, "; ".join(str(e) for e in errors))
        return ReportResult(report_type=report_type, scenario=parsed.scenario, errors=errors)

    data = _REPORTS[report_type](parsed.scenario, ages, BenefitScheduleCache())
    elapsed = time.perf_counter() - started
    logger.info("Built %s report for birth year %s in %.3fs", report_type, parsed.scenario.birth_year, elapsed)
    return ReportResult(
        report_type=report_type, scenario=parsed.scenario, claiming_ages=ages, data=data, elapsed=elapsed,
    )


__all__ = ["ReportResult", "read_claiming_ages", "run_report"]
