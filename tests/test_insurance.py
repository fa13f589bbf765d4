from portfolio_advisor.tools.insurance import recommend_insurance


def test_senior_high_income_band():
    recs = recommend_insurance({"age": 55, "income": 200000})
    assert len(recs) == 3
    assert recs[0].startswith("Life Insurance: Coverage of 10x")
    assert recs[2].startswith("Long-term Care Insurance")


def test_age_50_is_not_over_50():
    recs = recommend_insurance({"age": 50, "income": 200000})
    assert recs == ["Life Insurance: 8-10x income coverage suggested",
                    "Disability Insurance: Protect your earning capacity"]


def test_young_high_earner():
    recs = recommend_insurance({"age": 28, "income": 90000})
    assert recs[0] == "Term Life Insurance: Build a foundation of protection"


def test_thirties_fall_to_default():
    for profile in ({"age": 35, "income": 50000}, {"age": 35, "income": 300000}, {"age": 28, "income": 80000}):
        recs = recommend_insurance(profile)
        assert recs == ["Term Life Insurance: Essential protection for dependents",
                        "Health Insurance: Ensure adequate coverage"]
