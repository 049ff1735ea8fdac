APP_NAME = "Back to Work: Childcare Break-Even Calculator"

# Default form values (annual, nominal $)
DEFAULTS = {
    "working_income": 80_000,
    "sahp_income": 40_000,
    "childcare_costs": [20_000],
    "use_fsa": False,
}

# Payroll (FICA): Social Security + Medicare, single combined rate up to the wage cap
FICA_RATE = 0.0765
SS_WAGE_CAP = 168_600

# Child tax credit (simplified: does not scale past two dependents)
CTC_PER_CHILD = 2_000
CTC_MAX = 4_000

# Dependent-care FSA pool, spread across childcare costs in order
FSA_LIMIT = 5_000

# Break-even search over the second income
BREAK_EVEN_LOWER = 0.0
BREAK_EVEN_UPPER = 300_000.0
BREAK_EVEN_ITERATIONS = 20
BREAK_EVEN_TOLERANCE = 1.0

# Second-income grid for the what-if chart
SWEEP_POINTS = 61
