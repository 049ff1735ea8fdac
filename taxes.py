"""
Simplified combined-income tax for a New York City household.
Goal: give a realistic ballpark, not handle every edge case.

We model: federal, state and city progressive brackets on gross wages (no
deductions), plus a flat FICA levy up to the Social Security wage cap.
A credit is taken off the federal component only.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List

from config import FICA_RATE, SS_WAGE_CAP

@dataclass(frozen=True)
class Bracket:
    cap: float   # upper threshold (inclusive); math.inf for the top bracket
    rate: float  # marginal rate, e.g., 0.22 for 22%

@dataclass(frozen=True)
class TaxSystem:
    name: str
    federal: List[Bracket] = field(default_factory=list)
    state: List[Bracket] = field(default_factory=list)
    city: List[Bracket] = field(default_factory=list)
    notes: str = ""

def _nyc_mfj_2024():
    # 2024 married filing jointly; all income treated as wages
    return TaxSystem(
        name="New York City (married filing jointly, 2024)",
        federal=[
            Bracket(23_200, 0.10),
            Bracket(94_300, 0.12),
            Bracket(201_050, 0.22),
            Bracket(383_900, 0.24),
            Bracket(487_450, 0.32),
            Bracket(731_200, 0.35),
            Bracket(math.inf, 0.37),
        ],
        state=[
            Bracket(17_150, 0.04),
            Bracket(23_600, 0.045),
            Bracket(27_900, 0.0525),
            Bracket(43_000, 0.059),
            Bracket(161_550, 0.0621),
            Bracket(323_200, 0.0649),
            Bracket(2_155_350, 0.0685),
            Bracket(math.inf, 0.109),
        ],
        city=[
            Bracket(21_600, 0.03078),
            Bracket(45_000, 0.03762),
            Bracket(90_000, 0.03819),
            Bracket(math.inf, 0.03876),
        ],
        notes="Simplified; no standard deduction, no state or city credits.",
    )

NYC_MFJ_2024 = _nyc_mfj_2024()

def bracket_tax(income: float, brackets: List[Bracket]) -> float:
    tax = 0.0
    last = 0.0
    for b in brackets:
        if income > b.cap:
            tax += (b.cap - last) * b.rate
            last = b.cap
        else:
            # income at the cap stays in this bracket
            tax += (income - last) * b.rate
            break
    return tax

def payroll_tax(income: float) -> float:
    """FICA on wages up to the Social Security wage cap."""
    return FICA_RATE * min(income, SS_WAGE_CAP)

def tax_breakdown(income: float, credit: float = 0.0,
                  system: TaxSystem = NYC_MFJ_2024) -> Dict[str, float]:
    """
    Per-component tax on `income`. The credit comes off the federal part,
    which may go negative; only the total is floored at zero.
    """
    federal = bracket_tax(income, system.federal) - credit
    state = bracket_tax(income, system.state)
    city = bracket_tax(income, system.city)
    fica = payroll_tax(income)
    # max(total, 0.0) keeps NaN as NaN
    total = max(federal + state + city + fica, 0.0)
    return {
        "federal": federal,
        "state": state,
        "city": city,
        "payroll": fica,
        "total": total,
    }

def compute_tax(income: float, credit: float = 0.0,
                system: TaxSystem = NYC_MFJ_2024) -> float:
    return tax_breakdown(income, credit, system)["total"]

def net_from_gross(gross: float, credit: float = 0.0,
                   system: TaxSystem = NYC_MFJ_2024) -> float:
    return gross - compute_tax(gross, credit, system)
