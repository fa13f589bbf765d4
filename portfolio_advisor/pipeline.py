# PURPOSE: The advice engine and its validating pipeline wrapper.
# CONTEXT: predict_portfolio() is the pure computation a UI calls on "analyze";
#          run_pipeline() adds schema validation on both sides plus a structured log line.
# CREDITS: Original work, no external code reuse.

from __future__ import annotations
import time
import uuid
from typing import Any, Dict, Optional

from portfolio_advisor.agent_io import validate_prediction_result, validate_profile
from portfolio_advisor.logging_setup import get_logger
from portfolio_advisor.model_interface.loader import load_model
from portfolio_advisor.model_interface.portfolio_model import AllocationModel
from portfolio_advisor.model_interface.types import PredictionResult, UserProfile
from portfolio_advisor.tools.compliance import adjust_for_compliance
from portfolio_advisor.tools.feature_ranker import rank_features
from portfolio_advisor.tools.growth import project_growth
from portfolio_advisor.tools.insurance import recommend_insurance
from portfolio_advisor.tools.life_events import extract_life_events
from portfolio_advisor.tools.narrative import generate_explanation
from portfolio_advisor.tools.risk_return import summarize_risk_return

log = get_logger(__name__)


def predict_portfolio(profile: UserProfile, model: Optional[AllocationModel] = None) -> PredictionResult:
    """
    Turn a user profile into a full recommendation.

    steps:
    1) Extract life events, only when a note was supplied.
    2) Predict the raw allocation from age and risk score.
    3) Apply the compliance cap; the adjusted allocation is what gets rendered.
    4) Rank features and write the narrative.
    5) Insurance suggestions, growth projections and risk/return summary.

    parameters:
    - profile: UserProfile – {age, income, savings, risk_score, life_events?}
    - model: AllocationModel|None – defaults to load_model() (ALLOCATION_MODEL env var)

    returns:
    - PredictionResult – 'extracted_life_events' is present only if life_events was given.
    """
    model = model or load_model()
    note = profile.get("life_events")
    life_events = extract_life_events(note) if note else None

    predicted = model.predict(profile["age"], profile["risk_score"])
    adjusted, compliance_explanation = adjust_for_compliance(predicted, profile["risk_score"])

    features = rank_features(profile, adjusted)

    result: PredictionResult = {
        "predicted_allocation": predicted,
        "adjusted_allocation": adjusted,
        "llm_explanation": generate_explanation(profile, adjusted, features, life_events),
        "compliance_explanation": compliance_explanation,
        "insurance_recommendations": recommend_insurance(profile),
        "growth_projections": project_growth(profile["savings"], adjusted),
        "risk_return": summarize_risk_return(adjusted),
    }
    if life_events is not None:
        result["extracted_life_events"] = life_events
    return result


def run_pipeline(payload: Dict[str, Any], model: Optional[AllocationModel] = None) -> PredictionResult:
    """
    Validated end-to-end run.

    steps:
    1) Validate input against the UserProfile schema (raises ValidationError).
    2) Run predict_portfolio().
    3) Validate output against the PredictionResult schema.
    4) Log completion with latency and a run id.
    """
    t0 = time.time()
    run_id = uuid.uuid4().hex
    validate_profile(payload)

    result = predict_portfolio(payload, model=model)

    validate_prediction_result(result)
    log.info(
        "analysis.completed",
        run_id=run_id,
        compliance_adjusted=bool(result["compliance_explanation"]),
        life_events=result.get("extracted_life_events"),
        latency_ms=round((time.time() - t0) * 1000, 1),
    )
    return result
