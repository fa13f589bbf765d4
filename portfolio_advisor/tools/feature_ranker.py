from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from portfolio_advisor.constants.bands import AGE_BANDS, HIGH_INCOME, MODERATE_INCOME, RISK_BANDS
from portfolio_advisor.model_interface.types import Allocation, UserProfile

DOMINANCE_TAGS = {
    "stocks": "equity-heavy allocation",
    "bonds": "bond-heavy allocation",
    "cash": "cash-heavy allocation",
}


def band_label(value: float, bands: Sequence[Tuple[Optional[float], str]]) -> str:
    """Return the label of the first band whose upper bound exceeds value (None = open-ended)."""
    for upper, label in bands:
        if upper is None or value < upper:
            return label
    raise ValueError(f"No band matches {value!r}")


def risk_band(risk_score: float) -> str:
    return band_label(risk_score, RISK_BANDS)


def age_band(age: float) -> str:
    return band_label(age, AGE_BANDS)


def income_band(income: float) -> Optional[str]:
    if income > HIGH_INCOME:
        return "high income"
    if income > MODERATE_INCOME:
        return "moderate income"
    return None


def rank_features(profile: UserProfile, allocation: Allocation) -> List[str]:
    """
    Describe which profile attributes drive the recommendation.

    returns:
    - list[str] – always a risk-tolerance and an age descriptor, then income, savings and
      the dominant asset class when there is one.
    """
    features = [f"{risk_band(profile['risk_score'])} risk tolerance", age_band(profile["age"])]

    income = income_band(profile["income"])
    if income:
        features.append(income)

    if profile["savings"] > 0:
        features.append("savings")

    for name, tag in DOMINANCE_TAGS.items():
        others = [v for k, v in allocation.items() if k != name]
        if all(allocation[name] > v for v in others):
            features.append(tag)

    return features
