"""Data contracts for investment growth simulations."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class InterestType(str, Enum):
    COMPOUND = "compound"
    SIMPLE = "simple"


class DepositFrequency(str, Enum):
    NONE = "none"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class TaxTiming(str, Enum):
    ANNUAL = "annual"
    MATURITY = "maturity"


REQUIRED_FIELDS: Tuple[str, ...] = (
    "principal",
    "interestType",
    "annualRate",
    "years",
    "depositAmount",
    "depositFrequency",
    "taxRate",
    "taxTiming",
    "managementFee",
    "tradingFee",
)

# checked in this order; (min, max) inclusive
NUMERIC_FIELD_BOUNDS: Dict[str, Tuple[int, int]] = {
    "principal": (0, 1_000_000_000_000),
    "annualRate": (0, 100),
    "years": (1, 100),
    "depositAmount": (0, 1_000_000_000),
    "taxRate": (0, 100),
    "managementFee": (0, 100),
    "tradingFee": (0, 1_000_000_000),
}


class SimulationRequest(BaseModel):
    """Validated inputs for a single simulation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float = Field(ge=0, le=1_000_000_000_000, description="Initial amount invested.")
    interestType: InterestType
    annualRate: float = Field(ge=0, le=100, description="Annual return in percent (5 means 5%).")
    years: int = Field(ge=1, le=100)
    depositAmount: float = Field(
        ge=0,
        le=1_000_000_000,
        description="Amount deposited per period; ignored when depositFrequency is 'none'.",
    )
    depositFrequency: DepositFrequency
    taxRate: float = Field(ge=0, le=100, description="Tax on interest in percent.")
    taxTiming: TaxTiming
    managementFee: float = Field(ge=0, le=100, description="Annual fee on balance in percent.")
    tradingFee: float = Field(ge=0, le=1_000_000_000, description="One-time fee taken before year 1.")


class YearRecord(BaseModel):
    """Single row of a simulation schedule."""

    year: int = Field(..., ge=1)
    principal: float  # cumulative: initial principal plus deposits so far
    deposit: float
    interest: float
    tax: float
    fee: float
    # can go negative when fees and taxes outrun growth
    balance: float


class SimulationSummary(BaseModel):
    """Headline figures derived from a full schedule."""

    finalBalance: float
    totalPrincipal: float
    totalDeposits: float
    totalInterest: float
    totalTax: float
    totalFee: float
    netReturn: float
    effectiveAnnualRate: float


class SimulationResponse(BaseModel):
    success: bool
    data: Optional[List[YearRecord]] = None
    error: Optional[str] = None


class SummaryResponse(BaseModel):
    success: bool
    data: Optional[SimulationSummary] = None
    error: Optional[str] = None


# Starting values the simulator form is reset to.
DEFAULT_SIMULATION_INPUT: Dict[str, object] = {
    "principal": 1000000,
    "interestType": InterestType.COMPOUND.value,
    "annualRate": 5,
    "years": 10,
    "depositAmount": 0,
    "depositFrequency": DepositFrequency.NONE.value,
    "taxRate": 20.315,
    "taxTiming": TaxTiming.MATURITY.value,
    "managementFee": 0,
    "tradingFee": 0,
}
