import math

import pytest

from calculator import ScenarioInput, evaluate, find_break_even
from config import BREAK_EVEN_UPPER
from taxes import net_from_gross


def test_example_household_is_deterministic():
    inp = ScenarioInput(working_income=80_000, sahp_income=40_000, childcare_costs=[20_000], use_fsa=False)
    first = evaluate(inp)
    second = evaluate(inp)

    assert first == second
    assert first.child_tax_credit == 2_000
    assert first.current_take_home == pytest.approx(59_471.594)
    assert first.new_take_home == pytest.approx(85_012.894)
    assert first.childcare_cost == 20_000
    assert first.delta == pytest.approx(5_541.3)
    assert first.break_even_income is None
    assert first.fsa_used == 0.0


@pytest.mark.parametrize("use_fsa", [False, True])
def test_no_childcare_costs(use_fsa):
    out = evaluate(ScenarioInput(working_income=90_000, sahp_income=30_000, childcare_costs=[], use_fsa=use_fsa))
    assert out.childcare_cost == 0
    assert out.fsa_used == 0
    assert out.child_tax_credit == 0
    assert out.delta == pytest.approx(out.new_take_home - out.current_take_home)


def test_fsa_reduces_childcare_not_taxes():
    without = evaluate(ScenarioInput(80_000, 40_000, [6_000], use_fsa=False))
    with_fsa = evaluate(ScenarioInput(80_000, 40_000, [6_000], use_fsa=True))

    assert with_fsa.fsa_used == 5_000
    assert with_fsa.childcare_cost == 1_000
    assert with_fsa.current_take_home == without.current_take_home
    assert with_fsa.new_take_home == without.new_take_home
    assert with_fsa.delta == pytest.approx(without.delta + 5_000)


def test_break_even_found_for_deficit():
    inp = ScenarioInput(working_income=80_000, sahp_income=10_000, childcare_costs=[20_000, 18_000])
    out = evaluate(inp)

    assert out.delta < 0
    assert out.break_even_income is not None
    assert inp.sahp_income < out.break_even_income < BREAK_EVEN_UPPER

    rerun = evaluate(ScenarioInput(80_000, out.break_even_income, [20_000, 18_000]))
    assert abs(rerun.delta) < 1


def test_break_even_with_fsa_holds_adjusted_cost():
    out = evaluate(ScenarioInput(120_000, 0, [25_000], use_fsa=True))
    assert out.childcare_cost == 20_000
    rerun = evaluate(ScenarioInput(120_000, out.break_even_income, [25_000], use_fsa=True))
    assert abs(rerun.delta) < 1


def test_break_even_stops_at_search_ceiling():
    # childcare this large cannot be covered by any income in range
    b = find_break_even(80_000, 1_000_000)
    assert BREAK_EVEN_UPPER - 1 < b < BREAK_EVEN_UPPER


def test_break_even_zero_childcare_is_near_zero():
    b = find_break_even(80_000, 0)
    assert 0 <= b < 5
    net_delta = net_from_gross(80_000 + b) - net_from_gross(80_000)
    assert abs(net_delta) < 1


def test_nan_income_gives_nan_output():
    out = evaluate(ScenarioInput(working_income=float("nan"), sahp_income=40_000, childcare_costs=[10_000]))
    assert math.isnan(out.current_take_home)
    assert math.isnan(out.delta)
    assert out.break_even_income is None
