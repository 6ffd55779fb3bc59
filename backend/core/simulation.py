"""Investment growth simulation."""

from __future__ import annotations

from typing import List

from backend.schemas.simulation import (
    DepositFrequency,
    InterestType,
    SimulationRequest,
    SimulationSummary,
    TaxTiming,
    YearRecord,
)


def yearly_deposit(amount: float, frequency: DepositFrequency) -> float:
    """Total deposited per year; the amount only counts once a frequency is chosen."""
    if frequency == DepositFrequency.MONTHLY:
        return amount * 12
    if frequency == DepositFrequency.YEARLY:
        return amount
    return 0.0


def simulate_years(request: SimulationRequest) -> List[YearRecord]:
    """
    Build the year-by-year schedule without any maturity adjustment.

    Order of operations (per year):
      1) Add this year's deposit to the balance.
      2) Interest: compound -> on the post-deposit balance,
                   simple   -> on the original principal only.
      3) Management fee on the post-deposit balance.
      4) Tax on the interest (annual timing only; maturity defers it).
      5) balance += interest - tax - fee, then record the row.

    The trading fee is taken once before year 1 and may leave the balance
    negative; nothing is clamped.
    """
    rate = request.annualRate / 100
    fee_rate = request.managementFee / 100
    tax_rate = request.taxRate / 100
    deposit = yearly_deposit(request.depositAmount, request.depositFrequency)

    balance = request.principal - request.tradingFee
    contributed = request.principal

    rows: List[YearRecord] = []
    for year in range(1, request.years + 1):
        balance += deposit

        if request.interestType == InterestType.COMPOUND:
            interest = balance * rate
        else:
            interest = request.principal * rate

        fee = balance * fee_rate
        tax = interest * tax_rate if request.taxTiming == TaxTiming.ANNUAL else 0.0

        balance += interest - tax - fee

        # year 1 carries the initial principal only
        if year > 1:
            contributed += deposit

        rows.append(
            YearRecord(
                year=year,
                principal=contributed,
                deposit=deposit,
                interest=interest,
                tax=tax,
                fee=fee,
                balance=balance,
            )
        )

    return rows


def apply_maturity_tax(records: List[YearRecord], tax_rate: float) -> List[YearRecord]:
    """Charge tax on all interest in the final year and return the patched schedule.

    ``tax_rate`` is in percent. Earlier rows are left untouched.
    """
    if not records:
        return records

    total_interest = sum(row.interest for row in records)
    maturity_tax = total_interest * (tax_rate / 100)

    last = records[-1]
    patched = last.model_copy(update={"tax": maturity_tax, "balance": last.balance - maturity_tax})
    return [*records[:-1], patched]


def simulate(request: SimulationRequest) -> List[YearRecord]:
    """Run a validated request and return one record per year."""
    rows = simulate_years(request)
    if request.taxTiming == TaxTiming.MATURITY:
        rows = apply_maturity_tax(rows, request.taxRate)
    return rows


def summarize(records: List[YearRecord], years: int) -> SimulationSummary:
    """Totals over a schedule plus the average yearly net return on principal."""
    if not records:
        return SimulationSummary(
            finalBalance=0.0,
            totalPrincipal=0.0,
            totalDeposits=0.0,
            totalInterest=0.0,
            totalTax=0.0,
            totalFee=0.0,
            netReturn=0.0,
            effectiveAnnualRate=0.0,
        )

    final = records[-1]
    total_interest = sum(row.interest for row in records)
    total_tax = sum(row.tax for row in records)
    total_fee = sum(row.fee for row in records)
    net_return = total_interest - total_tax - total_fee

    # cumulative principal already includes every deposit
    total_principal = final.principal
    if total_principal > 0 and years > 0:
        effective_rate = (net_return / total_principal * 100) / years
    else:
        effective_rate = 0.0

    return SimulationSummary(
        finalBalance=final.balance,
        totalPrincipal=total_principal,
        totalDeposits=sum(row.deposit for row in records),
        totalInterest=total_interest,
        totalTax=total_tax,
        totalFee=total_fee,
        netReturn=net_return,
        effectiveAnnualRate=effective_rate,
    )


__all__ = [
    "yearly_deposit",
    "simulate_years",
    "apply_maturity_tax",
    "simulate",
    "summarize",
]
