"""Validation of raw simulation payloads.

Checks run in a fixed order and stop at the first failure, so the same
payload always produces the same message:

  1) payload must be a mapping
  2) every required field must be present
  3) numeric fields must be numbers (not bool, not NaN) within their bounds
  4) interestType, depositFrequency and taxTiming must be known choices
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from backend.schemas.simulation import (
    NUMERIC_FIELD_BOUNDS,
    REQUIRED_FIELDS,
    DepositFrequency,
    InterestType,
    SimulationRequest,
    TaxTiming,
)


class SimulationRequestError(ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass
class ValidationResult:
    success: bool
    data: Optional[SimulationRequest] = None
    error: Optional[str] = None


def _fail(message: str) -> ValidationResult:
    return ValidationResult(success=False, error=message)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def _choice_values(enum_cls) -> tuple:
    return tuple(member.value for member in enum_cls)


def validate_simulation_request(data: Any) -> ValidationResult:
    """Check a decoded JSON payload and build a SimulationRequest from it."""
    if not isinstance(data, Mapping):
        return _fail("request data invalid")

    for field in REQUIRED_FIELDS:
        if field not in data:
            return _fail(f"required field '{field}' is missing")

    for field, (low, high) in NUMERIC_FIELD_BOUNDS.items():
        value = data[field]
        if not _is_number(value):
            return _fail(f"'{field}' must be numeric")
        if value < low or value > high:
            return _fail(f"'{field}' must be between {low} and {high}")

    if data["interestType"] not in _choice_values(InterestType):
        return _fail("interest type must be 'compound' or 'simple'")

    if data["depositFrequency"] not in _choice_values(DepositFrequency):
        return _fail("deposit frequency must be one of 'none', 'monthly' or 'yearly'")

    if data["taxTiming"] not in _choice_values(TaxTiming):
        return _fail("tax timing must be 'annual' or 'maturity'")

    request = SimulationRequest(
        principal=float(data["principal"]),
        interestType=InterestType(data["interestType"]),
        annualRate=float(data["annualRate"]),
        # a loop over year <= 2.5 runs twice
        years=int(data["years"]),
        depositAmount=float(data["depositAmount"]),
        depositFrequency=DepositFrequency(data["depositFrequency"]),
        taxRate=float(data["taxRate"]),
        taxTiming=TaxTiming(data["taxTiming"]),
        managementFee=float(data["managementFee"]),
        tradingFee=float(data["tradingFee"]),
    )
    return ValidationResult(success=True, data=request)


def parse_simulation_request(data: Any) -> SimulationRequest:
    """Like validate_simulation_request, but raises SimulationRequestError."""
    result = validate_simulation_request(data)
    if not result.success:
        raise SimulationRequestError(result.error or "request data invalid")
    return result.data
