# PURPOSE: Default allocation model: an age/risk glide path for stocks, bonds and cash.
# CONTEXT: Stocks scale with the risk score and the years left until 65; bonds take an
#          age-proportional share of the remainder; cash is the residual.
# CREDITS: Original work, no external code reuse.

from __future__ import annotations
from typing import Dict

from portfolio_advisor.logging_setup import get_logger
from portfolio_advisor.model_interface.portfolio_model import AllocationModel
from portfolio_advisor.model_interface.types import Allocation
from portfolio_advisor.utils.rounding import round_allocation

log = get_logger(__name__)

RETIREMENT_AGE = 65
STOCKS_PER_RISK_POINT = 5

EQUAL_THIRDS: Allocation = {"stocks": 33.33, "bonds": 33.33, "cash": 33.34}


def raw_weights(age: float, risk_score: float) -> Dict[str, float]:
    """
    Unclamped glide-path weights in percent.

    parameters:
    - age: float – investor age in years
    - risk_score: float – 1 (conservative) to 10 (aggressive)

    returns:
    - dict – {"stocks", "bonds", "cash"}; values may be negative for extreme inputs
    """
    stocks = risk_score * STOCKS_PER_RISK_POINT + (RETIREMENT_AGE - age) / 2
    bonds = (100 - stocks) * (age / RETIREMENT_AGE)
    cash = 100 - stocks - bonds
    return {"stocks": stocks, "bonds": bonds, "cash": cash}


def normalize_weights(raw: Dict[str, float]) -> Allocation:
    """
    Clamp each weight at zero (no redistribution), rescale to 100 and round to 2dp.

    A non-positive total has nothing to rescale, so equal thirds are returned instead.
    """
    clamped = {k: max(0.0, v) for k, v in raw.items()}
    total = sum(clamped.values())
    if total <= 0:
        log.warning("allocation.zero_total", raw=raw)
        return dict(EQUAL_THIRDS)
    return round_allocation({k: v / total * 100 for k, v in clamped.items()})


class GlidePathModel(AllocationModel):
    """
    Allocation model:
    1) stocks = risk_score * 5 + (65 - age) / 2
    2) bonds  = (100 - stocks) * age / 65
    3) cash   = 100 - stocks - bonds
    4) Clamp negatives to zero, normalise to 100% and round.
    """

    def predict(self, age: float, risk_score: float) -> Allocation:
        return normalize_weights(raw_weights(age, risk_score))
