"""
Household take-home with and without the stay-at-home parent (SAHP) working.

Both scenarios share the same child tax credit. Childcare is only paid in the
"SAHP works" scenario, so the surplus/deficit is:

    delta = new_take_home - (current_take_home + childcare_cost)

When delta is negative we bisect for the second income that brings it to ~0.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from config import (
    BREAK_EVEN_ITERATIONS,
    BREAK_EVEN_LOWER,
    BREAK_EVEN_TOLERANCE,
    BREAK_EVEN_UPPER,
)
from childcare import apply_fsa, child_tax_credit
from taxes import net_from_gross

@dataclass
class ScenarioInput:
    working_income: float
    sahp_income: float
    childcare_costs: List[float] = field(default_factory=list)  # annual, one per dependent
    use_fsa: bool = False

@dataclass
class ScenarioOutput:
    current_take_home: float
    new_take_home: float
    childcare_cost: float         # paid out of pocket, after any FSA
    delta: float                  # positive = surplus from the SAHP working
    break_even_income: Optional[float] = None  # only searched when delta < 0
    child_tax_credit: float = 0.0
    fsa_used: float = 0.0

def find_break_even(working_income: float, childcare_cost: float, credit: float = 0.0,
                    lower: float = BREAK_EVEN_LOWER, upper: float = BREAK_EVEN_UPPER,
                    iterations: int = BREAK_EVEN_ITERATIONS,
                    tolerance: float = BREAK_EVEN_TOLERANCE) -> float:
    """
    Second income at which the household breaks even after childcare.
    Fixed number of bisection steps; stops early once |delta| < tolerance.
    Returns the midpoint of the final interval, so a root above `upper`
    comes back as a value just under `upper`.
    """
    current = net_from_gross(working_income, credit)
    lo, hi = lower, upper
    for _ in range(iterations):
        mid = (lo + hi) / 2.0
        net_delta = net_from_gross(working_income + mid, credit) - (current + childcare_cost)
        if abs(net_delta) < tolerance:
            return mid
        if net_delta < 0:
            lo = mid
        else:
            hi = mid
    return (lo + hi) / 2.0

def evaluate(inp: ScenarioInput) -> ScenarioOutput:
    costs = list(inp.childcare_costs)
    credit = child_tax_credit(len(costs))

    fsa_used = 0.0
    if inp.use_fsa:
        costs, fsa_used = apply_fsa(costs)

    current_take_home = net_from_gross(inp.working_income, credit)
    combined = inp.working_income + inp.sahp_income
    new_take_home = net_from_gross(combined, credit)

    childcare_cost = float(sum(costs))
    delta = new_take_home - (current_take_home + childcare_cost)

    break_even = None
    if delta < 0:
        break_even = find_break_even(inp.working_income, childcare_cost, credit)

    return ScenarioOutput(
        current_take_home=current_take_home,
        new_take_home=new_take_home,
        childcare_cost=childcare_cost,
        delta=delta,
        break_even_income=break_even,
        child_tax_credit=credit,
        fsa_used=fsa_used,
    )
