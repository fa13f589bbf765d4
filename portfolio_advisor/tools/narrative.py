"""
Narrative explanation builder.

PURPOSE: Assemble the human-readable explanation shown next to the allocation chart.
CONTEXT: Template text only, no LLM call. The explanation is an ordered list of
         (predicate, renderer) sections; each renderer returns one text fragment and
         the fragments are concatenated in order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from portfolio_advisor.constants.bands import MODERATE_INCOME, RETIREMENT_URGENCY_YEARS
from portfolio_advisor.model_interface.types import Allocation, LifeEvents, UserProfile
from portfolio_advisor.tools.feature_ranker import age_band, income_band, risk_band
from portfolio_advisor.tools.life_events import has_life_events


@dataclass(frozen=True)
class NarrativeContext:
    """Inputs every section renderer can read."""
    profile: UserProfile
    allocation: Allocation
    features: List[str]
    life_events: Optional[LifeEvents] = None


def _number(x: float) -> str:
    """Show whole numbers without a trailing '.0'."""
    return str(int(x)) if float(x).is_integer() else str(x)


def _money(x: float) -> str:
    return f"${x:,.0f}"


def _years(n: int) -> str:
    return f"{n} year" if n == 1 else f"{n} years"


def profile_summary(ctx: NarrativeContext) -> str:
    p = ctx.profile
    return (
        "An investor with the following profile:\n"
        f"- Age: {_number(p['age'])}\n"
        f"- Income: {_money(p['income'])}\n"
        f"- Savings: {_money(p['savings'])}\n"
        f"- Risk Score: {p['risk_score']:.1f}\n\n"
    )


def allocation_summary(ctx: NarrativeContext) -> str:
    a = ctx.allocation
    return (
        "is recommended to allocate their portfolio as follows:\n"
        f"- Stocks: {a['stocks']:.1f}%\n"
        f"- Bonds: {a['bonds']:.1f}%\n"
        f"- Cash: {a['cash']:.1f}%\n\n"
    )


def feature_summary(ctx: NarrativeContext) -> str:
    return f"The most important factors influencing this recommendation are {', '.join(ctx.features)}.\n\n"


RISK_SENTENCES = {
    "high": "Your high risk tolerance allows for more aggressive growth through stocks. ",
    "moderate": "Your moderate risk tolerance supports a balanced approach between growth and stability. ",
    "conservative": "Your conservative risk profile prioritizes safety, favoring bonds and cash for capital preservation. ",
}

AGE_SENTENCES = {
    "young age": "Being young, you have time to recover from market downturns, which supports long-term growth. ",
    "mid-age": "During your peak earning years, this allocation helps you grow wealth while managing risk as retirement approaches. ",
    "near-retirement age": "At this stage, preserving accumulated wealth is important; hence a higher allocation to bonds and cash. ",
}

INCOME_SENTENCES = {
    "high income": "Your strong income gives you flexibility to handle market fluctuations effectively. ",
    "moderate income": "Your solid income provides a foundation for long-term wealth accumulation. ",
}


def risk_sentence(ctx: NarrativeContext) -> str:
    return "This allocation aims to balance growth and stability. " + RISK_SENTENCES[risk_band(ctx.profile["risk_score"])]


def age_sentence(ctx: NarrativeContext) -> str:
    return AGE_SENTENCES[age_band(ctx.profile["age"])]


def income_sentence(ctx: NarrativeContext) -> str:
    return INCOME_SENTENCES[income_band(ctx.profile["income"])]


def savings_sentence(ctx: NarrativeContext) -> str:
    return (
        f"Additionally, your savings of {_money(ctx.profile['savings'])} serve as a financial cushion, "
        "enhancing portfolio stability."
    )


def _marriage_line(n: int) -> str:
    return (f"- Marriage in {_years(n)}: set aside wedding costs in cash and review joint budgets "
            "and account beneficiaries.")


def _retirement_line(n: int) -> str:
    if n < RETIREMENT_URGENCY_YEARS:
        return (f"- Retirement in {_years(n)}: with less than a decade to go, start shifting gradually "
                "from stocks toward bonds and cash to protect what you have built.")
    return (f"- Retirement in {_years(n)}: your horizon still leaves room for growth assets; "
            "revisit this mix every few years as the date approaches.")


def _house_line(n: int) -> str:
    return (f"- Home purchase in {_years(n)}: keep the down payment in bonds and cash rather than stocks "
            "so a market dip does not delay the move.")


def _kids_line(n: int) -> str:
    return (f"- Children in {_years(n)}: consider a dedicated education savings account and revisit "
            "your life insurance cover.")


LIFE_EVENT_LINES: Tuple[Tuple[str, Callable[[int], str]], ...] = (
    ("marriage_years", _marriage_line),
    ("retirement_years", _retirement_line),
    ("house_years", _house_line),
    ("kids_years", _kids_line),
)


def life_events_block(ctx: NarrativeContext) -> str:
    lines = [render(ctx.life_events[field]) for field, render in LIFE_EVENT_LINES
             if ctx.life_events.get(field) is not None]
    return "\n\nUpcoming life events to plan for:\n" + "\n".join(lines)


SECTIONS: Tuple[Tuple[Callable[[NarrativeContext], bool], Callable[[NarrativeContext], str]], ...] = (
    (lambda ctx: True, profile_summary),
    (lambda ctx: True, allocation_summary),
    (lambda ctx: bool(ctx.features), feature_summary),
    (lambda ctx: True, risk_sentence),
    (lambda ctx: True, age_sentence),
    (lambda ctx: ctx.profile["income"] > MODERATE_INCOME, income_sentence),
    (lambda ctx: ctx.profile["savings"] > 0, savings_sentence),
    (lambda ctx: has_life_events(ctx.life_events), life_events_block),
)


def generate_explanation(
    profile: UserProfile,
    allocation: Allocation,
    features: List[str],
    life_events: Optional[LifeEvents] = None,
) -> str:
    """
    Build the explanation text for a recommendation.

    parameters:
    - profile: UserProfile – the investor's inputs
    - allocation: Allocation – the allocation being recommended (post-compliance)
    - features: list[str] – descriptors from rank_features()
    - life_events: LifeEvents|None – extracted milestones, if a note was supplied

    returns:
    - str – preformatted multi-line text; display only, not meant to be parsed.
    """
    ctx = NarrativeContext(profile, allocation, features, life_events)
    text = "".join(render(ctx) for applies, render in SECTIONS if applies(ctx))
    return text.rstrip()
