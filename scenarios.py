from dataclasses import asdict

import numpy as np
import pandas as pd

from calculator import ScenarioInput, ScenarioOutput, evaluate
from config import BREAK_EVEN_LOWER, BREAK_EVEN_UPPER, SWEEP_POINTS

def clone_input(inp: ScenarioInput, **overrides) -> ScenarioInput:
    base = asdict(inp)
    base.update(overrides)
    return ScenarioInput(**base)

def compare(inp: ScenarioInput, variants: list[tuple[str, dict]]) -> dict[str, ScenarioOutput]:
    """
    variants: list of (name, overrides-dict)
    returns: dict name -> evaluated output
    """
    res = {}
    for name, edits in variants:
        res[name] = evaluate(clone_input(inp, **edits))
    return res

def income_sweep(inp: ScenarioInput, incomes=None) -> pd.DataFrame:
    """
    Surplus/deficit for a grid of second incomes, holding everything else fixed.
    Defaults to the break-even search range.
    """
    if incomes is None:
        incomes = np.linspace(BREAK_EVEN_LOWER, BREAK_EVEN_UPPER, SWEEP_POINTS)
    rows = []
    for income in incomes:
        out = evaluate(clone_input(inp, sahp_income=float(income)))
        rows.append({
            "sahp_income": float(income),
            "new_take_home": out.new_take_home,
            "childcare_cost": out.childcare_cost,
            "delta": out.delta,
        })
    return pd.DataFrame(rows)
