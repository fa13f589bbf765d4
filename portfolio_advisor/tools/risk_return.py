from __future__ import annotations
import math

from portfolio_advisor.constants.bands import ASSET_ASSUMPTIONS, ASSET_CLASSES
from portfolio_advisor.model_interface.types import Allocation, RiskReturn
from portfolio_advisor.utils.rounding import round_pct


def summarize_risk_return(allocation: Allocation) -> RiskReturn:
    """
    Expected annual return and volatility of the allocation, in percent.

    notes:
    - Return is the weight-averaged asset return.
    - Risk treats the three classes as uncorrelated: sqrt(sum((risk_i * w_i)^2)).
    """
    exp_return = 0.0
    variance = 0.0
    asset_classes = []
    for name in ASSET_CLASSES:
        w = allocation[name] / 100
        a = ASSET_ASSUMPTIONS[name]
        exp_return += a["expected_return"] * w
        variance += (a["risk"] * w) ** 2
        asset_classes.append({
            "name": name,
            "allocation": allocation[name],
            "expected_return": a["expected_return"],
            "risk": a["risk"],
        })
    return {
        "expected_return": round_pct(exp_return),
        "risk": round_pct(math.sqrt(variance)),
        "asset_classes": asset_classes,
    }
