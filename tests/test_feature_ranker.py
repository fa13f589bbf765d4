from portfolio_advisor.tools.feature_ranker import rank_features


def _profile(**kw):
    base = {"age": 35, "income": 120000, "savings": 150000, "risk_score": 7.0}
    base.update(kw)
    return base


def test_reference_profile_features():
    alloc = {"stocks": 50.0, "bonds": 26.92, "cash": 23.08}
    assert rank_features(_profile(), alloc) == [
        "high risk tolerance", "mid-age", "moderate income", "savings", "equity-heavy allocation",
    ]


def test_band_edges():
    alloc = {"stocks": 30.0, "bonds": 40.0, "cash": 30.0}
    f = rank_features(_profile(age=50, risk_score=4.0, income=80000, savings=0), alloc)
    assert f == ["moderate risk tolerance", "near-retirement age", "bond-heavy allocation"]
    f = rank_features(_profile(age=34.9, risk_score=3.9, income=150001), alloc)
    assert f[:3] == ["conservative risk tolerance", "young age", "high income"]


def test_tied_allocation_has_no_dominance_tag():
    alloc = {"stocks": 40.0, "bonds": 40.0, "cash": 20.0}
    f = rank_features(_profile(), alloc)
    assert not any(x.endswith("-heavy allocation") for x in f)
    assert len(f) >= 2
