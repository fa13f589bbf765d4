# PURPOSE: Fixed thresholds and capital-market assumptions shared by the advice tools.
# CONTEXT: Every banding rule (risk, age, income, insurance, compliance) reads from here
#          so the narrative, feature ranker and advisors stay consistent.

ASSET_CLASSES = ("stocks", "bonds", "cash")

# Regulatory-style equity cap for lower risk scores.
COMPLIANCE_RISK_THRESHOLD = 5.0
COMPLIANCE_MAX_STOCKS = 70.0

# Risk score bands: score < upper bound -> label. Last band is open-ended.
RISK_BANDS = (
    (4.0, "conservative"),
    (7.0, "moderate"),
    (None, "high"),
)

AGE_BANDS = (
    (35, "young age"),
    (50, "mid-age"),
    (None, "near-retirement age"),
)

HIGH_INCOME = 150000
MODERATE_INCOME = 80000

# Annual blended-return inputs per scenario (stocks, bonds, cash).
SCENARIO_RATES = {
    "conservative": {"stocks": 0.04, "bonds": 0.03, "cash": 0.02},
    "expected":     {"stocks": 0.07, "bonds": 0.045, "cash": 0.02},
    "optimistic":   {"stocks": 0.10, "bonds": 0.06, "cash": 0.025},
}

PROJECTION_YEARS = (0, 5, 10, 15, 20, 25, 30)

# Long-run annual expected return and volatility, in percent.
ASSET_ASSUMPTIONS = {
    "stocks": {"expected_return": 9.5, "risk": 18.0},
    "bonds":  {"expected_return": 4.5, "risk": 6.0},
    "cash":   {"expected_return": 2.0, "risk": 1.0},
}

RETIREMENT_URGENCY_YEARS = 10
