# app.py
import streamlit as st
import plotly.graph_objects as go
import pandas as pd

from config import APP_NAME, DEFAULTS, BREAK_EVEN_UPPER, FSA_LIMIT
from ui import inject_css, header, helptext, format_currency, delta_label, kpi_card
from childcare import costs_to_df, costs_from_df
from calculator import ScenarioInput, evaluate
from scenarios import compare, income_sweep
from exporters import export_result, export_inputs
from taxes import NYC_MFJ_2024, tax_breakdown

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="🧸", layout="wide")
inject_css()
header(APP_NAME, "Does a stay-at-home parent going back to work pay for itself?")

with st.expander("How this app works (30 seconds)"):
    st.write("""
**Plain English version:**
- We tax the household's **combined** wages with simplified federal, New York State and New York City brackets, plus FICA.
- Each child in care earns a **child tax credit** ($2,000 each, capped at $4,000), taken off federal tax.
- A **dependent-care FSA** (optional) covers up to $5,000 of childcare. We only lower the childcare bill; we do not lower taxable income.
- **Surplus/deficit** = take-home with both incomes − (take-home with one income + childcare).
- If it's a deficit, we search for the **break-even** second income.
    """)

# ------------- Sidebar (inputs) -------------
st.sidebar.header("Household income")
working_income = st.sidebar.number_input(
    "Working parent's salary ($/yr)", min_value=0, value=DEFAULTS["working_income"], step=1000,
    help="Gross annual wages of the parent who already works."
)
sahp_income = st.sidebar.number_input(
    "Stay-at-home parent's prospective salary ($/yr)", min_value=0, value=DEFAULTS["sahp_income"], step=1000,
    help="Gross annual wages the stay-at-home parent would earn."
)
use_fsa = st.sidebar.checkbox(
    f"Use a dependent-care FSA (up to ${FSA_LIMIT:,})", value=DEFAULTS["use_fsa"],
    help="Applied to each child's cost in order until the pool runs out."
)

st.sidebar.header("Childcare")
st.sidebar.caption("One row per child. Add or delete rows as needed; blanks count as $0.")
childcare_df = st.sidebar.data_editor(
    costs_to_df(DEFAULTS["childcare_costs"]),
    num_rows="dynamic",
    column_config={
        "annual_cost": st.column_config.NumberColumn(
            "Childcare cost ($/yr)", min_value=0, step=500, format="$%d"
        )
    },
    use_container_width=True,
    key="childcare_rows",
)
childcare_costs = costs_from_df(childcare_df)

inp = ScenarioInput(
    working_income=float(working_income),
    sahp_income=float(sahp_income),
    childcare_costs=childcare_costs,
    use_fsa=use_fsa,
)
out = evaluate(inp)

# ------------- Results -------------
st.markdown("### 1) The bottom line")
label = delta_label(out.delta)
if out.delta >= 0:
    st.success(f"**{label} from SAHP working: {format_currency(out.delta)}** per year")
else:
    st.error(f"**{label} from SAHP working: {format_currency(out.delta)}** per year")

c1, c2, c3 = st.columns(3)
kpi_card(c1, "Current take-home (one income)", format_currency(out.current_take_home))
kpi_card(c2, "New take-home (both incomes)", format_currency(out.new_take_home))
kpi_card(c3, "Childcare cost (out of pocket)", format_currency(out.childcare_cost),
         note=f"After FSA of {format_currency(out.fsa_used)}" if use_fsa else "")

c4, c5 = st.columns(2)
kpi_card(c4, "Child tax credit (both scenarios)", format_currency(out.child_tax_credit))
if out.break_even_income is not None:
    kpi_card(c5, "Break-even second income", format_currency(out.break_even_income),
             note="Salary at which going back to work covers childcare")
    if out.break_even_income >= BREAK_EVEN_UPPER - 1:
        st.warning(f"Break-even is at or above ${BREAK_EVEN_UPPER:,.0f}; the search stops there.")
else:
    kpi_card(c5, "Break-even second income", "n/a", note="Already at or above break-even")

# ------------- Tax breakdown -------------
st.markdown("### 2) Where the tax goes")
helptext(f"{NYC_MFJ_2024.name}. {NYC_MFJ_2024.notes} The credit comes off federal tax only.")
before = tax_breakdown(inp.working_income, out.child_tax_credit)
after = tax_breakdown(inp.working_income + inp.sahp_income, out.child_tax_credit)
breakdown_df = pd.DataFrame({
    "One income": before,
    "Both incomes": after,
}).rename(index=str.capitalize)
st.dataframe(
    breakdown_df,
    column_config={col: st.column_config.NumberColumn(col, format="$%.2f") for col in breakdown_df.columns},
    use_container_width=True,
)

# ------------- Chart -------------
st.markdown("### 3) Surplus/deficit by second income")
sweep = income_sweep(inp)
fig = go.Figure()
fig.add_trace(go.Scatter(x=sweep["sahp_income"], y=sweep["delta"], mode="lines", name="Surplus / deficit"))
fig.add_hline(y=0, line_dash="dot", line_color="gray")
fig.add_vline(x=inp.sahp_income, line_dash="dash", line_color="green")
if out.break_even_income is not None:
    fig.add_vline(x=out.break_even_income, line_dash="dash", line_color="red")
fig.update_layout(
    xaxis_title="Stay-at-home parent's salary ($/yr)", yaxis_title="$ per year",
    hovermode="x unified", margin=dict(l=30, r=20, t=30, b=30)
)
st.plotly_chart(fig, use_container_width=True)
st.markdown("**How to read this:** green is the salary you entered; red (if shown) is the break-even. Above the dotted line, working pays.")

# ------------- FSA what-if -------------
st.markdown("### 4) With vs without the FSA")
variants = compare(inp, [("Without FSA", {"use_fsa": False}), ("With FSA", {"use_fsa": True})])
st.dataframe(pd.DataFrame({
    name: {
        "Childcare cost": format_currency(res.childcare_cost),
        "FSA used": format_currency(res.fsa_used),
        "Surplus / deficit": f"{delta_label(res.delta)} {format_currency(res.delta)}",
    }
    for name, res in variants.items()
}), use_container_width=True)

# ------------- Export -------------
st.markdown("### 5) Export")
name_csv, data_csv = export_result(out)
st.download_button("⬇️ Download results (CSV)", data_csv, file_name=name_csv, mime="text/csv")
name_json, data_json = export_inputs(inp)
st.download_button("⬇️ Download your inputs (JSON)", data_json, file_name=name_json, mime="application/json")

st.markdown("---")
st.caption("This app uses simplified 2024 tax rules and ignores deductions. It's a rough guide, not tax advice.")
