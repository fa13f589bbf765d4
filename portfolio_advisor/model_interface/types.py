from typing import TypedDict, List, Optional


class _ProfileBase(TypedDict):
    age: float
    income: float
    savings: float
    risk_score: float


class UserProfile(_ProfileBase, total=False):
    life_events: str


class LifeEvents(TypedDict):
    marriage_years: Optional[int]
    retirement_years: Optional[int]
    house_years: Optional[int]
    kids_years: Optional[int]


class Allocation(TypedDict):
    stocks: float
    bonds: float
    cash: float


class GrowthProjection(TypedDict):
    year: int
    conservative: int
    expected: int
    optimistic: int


class AssetClassSummary(TypedDict):
    name: str
    allocation: float
    expected_return: float
    risk: float


class RiskReturn(TypedDict):
    expected_return: float
    risk: float
    asset_classes: List[AssetClassSummary]


class _ResultBase(TypedDict):
    predicted_allocation: Allocation
    adjusted_allocation: Allocation
    llm_explanation: str
    compliance_explanation: str
    insurance_recommendations: List[str]
    growth_projections: List[GrowthProjection]
    risk_return: RiskReturn


class PredictionResult(_ResultBase, total=False):
    extracted_life_events: LifeEvents
