# PURPOSE: Compound-growth projections of current savings under three return scenarios.
# CONTEXT: Each scenario blends fixed per-asset-class annual rates using the allocation
#          as weights, then compounds over the fixed projection years.

from __future__ import annotations
from typing import Dict, List, Sequence

import numpy as np

from portfolio_advisor.constants.bands import ASSET_CLASSES, PROJECTION_YEARS, SCENARIO_RATES
from portfolio_advisor.model_interface.types import Allocation, GrowthProjection
from portfolio_advisor.utils.rounding import round_currency


def blended_rates(allocation: Allocation) -> Dict[str, float]:
    """
    Weighted annual return per scenario.

    parameters:
    - allocation: Allocation – percentages; weights are percentage / 100

    returns:
    - dict – {"conservative": r, "expected": r, "optimistic": r}
    """
    weights = np.array([allocation[k] for k in ASSET_CLASSES], dtype=float) / 100.0
    return {
        name: float(weights @ np.array([rates[k] for k in ASSET_CLASSES], dtype=float))
        for name, rates in SCENARIO_RATES.items()
    }


def project_growth(
    initial_amount: float,
    allocation: Allocation,
    years: Sequence[int] = PROJECTION_YEARS,
) -> List[GrowthProjection]:
    """
    Project `initial_amount` forward for each year in `years` (ascending).

    returns:
    - list[GrowthProjection] – one record per year with whole-unit amounts per scenario.
      Year 0 is the initial amount itself.
    """
    horizon = np.asarray(years, dtype=float)
    values = {
        name: initial_amount * np.power(1.0 + rate, horizon)
        for name, rate in blended_rates(allocation).items()
    }
    return [
        {
            "year": int(year),
            "conservative": round_currency(float(values["conservative"][i])),
            "expected": round_currency(float(values["expected"][i])),
            "optimistic": round_currency(float(values["optimistic"][i])),
        }
        for i, year in enumerate(years)
    ]
