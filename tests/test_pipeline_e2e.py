import logging
import math

import pytest
import structlog
from jsonschema import ValidationError

from portfolio_advisor.pipeline import predict_portfolio, run_pipeline


def test_pipeline_reference_profile():
    out = run_pipeline({"age": 35, "income": 120000, "savings": 150000, "risk_score": 7.0})
    assert out["predicted_allocation"] == {"stocks": 50.0, "bonds": 26.92, "cash": 23.08}
    assert out["adjusted_allocation"] == out["predicted_allocation"]
    assert out["compliance_explanation"] == ""
    assert out["growth_projections"][0]["expected"] == 150000
    assert "extracted_life_events" not in out
    assert out["llm_explanation"]


def test_pipeline_conservative_retiree_not_capped():
    out = run_pipeline({"age": 60, "income": 90000, "savings": 50000, "risk_score": 3.0})
    assert out["predicted_allocation"]["stocks"] < 70
    assert out["compliance_explanation"] == ""
    assert out["adjusted_allocation"] == out["predicted_allocation"]


def test_pipeline_with_life_events():
    out = run_pipeline({
        "age": 30, "income": 95000, "savings": 20000, "risk_score": 6.0,
        "life_events": "We're planning to buy a house in 3 years and have kids in 5 years",
    })
    assert out["extracted_life_events"] == {
        "marriage_years": None, "retirement_years": None, "house_years": 3, "kids_years": 5,
    }
    assert "Home purchase in 3 years" in out["llm_explanation"]


@pytest.mark.parametrize("age", [18, 29, 45, 51, 70, 100])
@pytest.mark.parametrize("risk", [1.0, 4.9, 5.0, 8.0, 10.0])
def test_pipeline_invariants(age, risk):
    out = run_pipeline({"age": age, "income": 160000, "savings": 10000, "risk_score": risk})
    adj = out["adjusted_allocation"]
    assert abs(adj["stocks"] + adj["bonds"] + adj["cash"] - 100) <= 0.01
    if risk < 5:
        assert adj["stocks"] <= 70
    if risk >= 5 or out["predicted_allocation"]["stocks"] <= 70:
        assert adj == out["predicted_allocation"]
        assert out["compliance_explanation"] == ""
    years = [p["year"] for p in out["growth_projections"]]
    assert years == sorted(years)


def test_engine_uses_injected_model():
    class AllStocks:
        def predict(self, age, risk_score):
            return {"stocks": 90.0, "bonds": 5.0, "cash": 5.0}

    out = predict_portfolio({"age": 40, "income": 0, "savings": 0, "risk_score": 2.0}, model=AllStocks())
    assert out["predicted_allocation"]["stocks"] == 90.0
    assert out["adjusted_allocation"] == {"stocks": 70.0, "bonds": 5.0, "cash": 25.0}
    assert "from 90.00% to 70%" in out["compliance_explanation"]


@pytest.mark.parametrize("payload,field", [
    ({"age": -5, "income": 1, "savings": 1, "risk_score": 5}, "age"),
    ({"age": 40, "income": 1, "savings": 1, "risk_score": 11}, "risk_score"),
    ({"age": 40, "income": -1, "savings": 1, "risk_score": 5}, "income"),
    ({"age": 40, "income": 1, "savings": math.nan, "risk_score": 5}, "savings"),
    ({"age": 40, "income": math.inf, "savings": 1, "risk_score": 5}, "income"),
    ({"age": "forty", "income": 1, "savings": 1, "risk_score": 5}, "age"),
])
def test_pipeline_rejects_bad_input(payload, field):
    with pytest.raises(ValidationError) as e:
        run_pipeline(payload)
    assert list(e.value.path) == [field]


def test_pipeline_rejects_missing_field():
    with pytest.raises(ValidationError):
        run_pipeline({"age": 40, "income": 1, "savings": 1})


@pytest.mark.parametrize("field", ["income", "savings"])
@pytest.mark.parametrize("amount", [1e28, 1e300])
def test_pipeline_rejects_implausibly_large_amounts(field, amount):
    payload = {"age": 35, "income": 120000, "savings": 150000, "risk_score": 7.0}
    payload[field] = amount
    with pytest.raises(ValidationError) as e:
        run_pipeline(payload)
    assert list(e.value.path) == [field]


def test_pipeline_handles_largest_accepted_savings():
    out = run_pipeline({"age": 18, "income": 1e12, "savings": 1e12, "risk_score": 10.0})
    last = out["growth_projections"][-1]
    assert last["optimistic"] > last["expected"] > 1e12


def test_engine_survives_savings_past_decimal_default_precision():
    out = predict_portfolio({"age": 35, "income": 120000, "savings": 1e28, "risk_score": 7.0})
    assert out["growth_projections"][0]["expected"] == int(1e28)


def test_pipeline_is_silent_on_stdout_without_logging_setup(monkeypatch, capsys):
    structlog.reset_defaults()
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    run_pipeline({"age": 35, "income": 120000, "savings": 150000, "risk_score": 7.0})
    assert capsys.readouterr().out == ""
