from typing import List, Tuple

import pandas as pd

from config import CTC_MAX, CTC_PER_CHILD, FSA_LIMIT

def child_tax_credit(num_dependents: int) -> float:
    """$2,000 per dependent, capped at $4,000 (simplified; no phase-out)."""
    return float(min(num_dependents * CTC_PER_CHILD, CTC_MAX))

def apply_fsa(costs: List[float], pool: float = FSA_LIMIT) -> Tuple[List[float], float]:
    """
    Spend a dependent-care FSA pool greedily across costs, in the order given.
    Returns (adjusted_costs, fsa_used).

    Only the childcare cost paid goes down; taxable income is left alone.
    """
    adjusted = []
    remaining = pool
    used = 0.0
    for cost in costs:
        if remaining > 0:
            cut = min(cost, remaining)
            remaining -= cut
            used += cut
            cost -= cut
        adjusted.append(cost)
    return adjusted, used

# ---------- Streamlit helpers ----------
def costs_to_df(costs: List[float]) -> pd.DataFrame:
    return pd.DataFrame({"annual_cost": [float(c) for c in costs]})

def costs_from_df(df: pd.DataFrame) -> List[float]:
    """One cost per table row; blanks and non-numbers count as $0."""
    if df is None or "annual_cost" not in df.columns:
        return []
    values = pd.to_numeric(df["annual_cost"], errors="coerce").fillna(0.0)
    return [float(v) for v in values]
