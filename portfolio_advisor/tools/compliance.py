from __future__ import annotations
from typing import Tuple

from portfolio_advisor.constants.bands import COMPLIANCE_MAX_STOCKS, COMPLIANCE_RISK_THRESHOLD
from portfolio_advisor.model_interface.types import Allocation
from portfolio_advisor.utils.rounding import move_to_cash


def adjust_for_compliance(predicted: Allocation, risk_score: float) -> Tuple[Allocation, str]:
    """
    Cap equity exposure for investors below the risk threshold.

    behaviour:
    - If risk_score < 5 and stocks > 70%, stocks are capped at 70% and the excess moves to cash.
    - Bonds are never touched.
    - Otherwise an unchanged copy is returned with an empty explanation.

    returns:
    - (Allocation, str) – new allocation and the notice text ("" when nothing changed)
    """
    if risk_score < COMPLIANCE_RISK_THRESHOLD and predicted["stocks"] > COMPLIANCE_MAX_STOCKS:
        excess = predicted["stocks"] - COMPLIANCE_MAX_STOCKS
        adjusted = move_to_cash(predicted, "stocks", excess)
        explanation = (
            f"Your stock allocation was adjusted from {predicted['stocks']:.2f}% to "
            f"{COMPLIANCE_MAX_STOCKS:.0f}% due to regulatory guidelines for moderate risk investors. "
            f"The excess was moved to cash for added security."
        )
        return adjusted, explanation
    return dict(predicted), ""
