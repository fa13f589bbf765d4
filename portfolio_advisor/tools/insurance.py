from typing import Callable, List, Tuple

from portfolio_advisor.constants.bands import HIGH_INCOME, MODERATE_INCOME
from portfolio_advisor.model_interface.types import UserProfile

# Evaluated top to bottom; the first matching band wins. Ages 30-40 intentionally
# fall through to the default band.
INSURANCE_BANDS: Tuple[Tuple[Callable[[UserProfile], bool], List[str]], ...] = (
    (
        lambda p: p["age"] > 50 and p["income"] > HIGH_INCOME,
        [
            "Life Insurance: Coverage of 10x annual income recommended",
            "Health/Critical Illness Cover: Consider comprehensive coverage",
            "Long-term Care Insurance: Plan for potential healthcare needs",
        ],
    ),
    (
        lambda p: p["age"] > 40,
        [
            "Life Insurance: 8-10x income coverage suggested",
            "Disability Insurance: Protect your earning capacity",
        ],
    ),
    (
        lambda p: p["age"] < 30 and p["income"] > MODERATE_INCOME,
        [
            "Term Life Insurance: Build a foundation of protection",
            "Disability Insurance: Review coverage as your career grows",
        ],
    ),
)

DEFAULT_RECOMMENDATIONS = [
    "Term Life Insurance: Essential protection for dependents",
    "Health Insurance: Ensure adequate coverage",
]


def recommend_insurance(profile: UserProfile) -> List[str]:
    """Map the profile's age/income band to an ordered list of insurance suggestions."""
    for matches, recommendations in INSURANCE_BANDS:
        if matches(profile):
            return list(recommendations)
    return list(DEFAULT_RECOMMENDATIONS)
