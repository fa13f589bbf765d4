# PURPOSE: Utilities to neatly round portfolio allocations and currency amounts.
# CONTEXT: Used to ensure stocks + bonds + cash always sum cleanly to 100.00 after rounding,
#          and that growth projections round half-up like a calculator would.
# CREDITS: Original work, no external code reuse.

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Covers every finite float (up to ~1.8e308) plus the decimal places kept.
_PRECISION = 400

TOTAL_PCT = Decimal(100)


def _quantize(x, places: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(x).quantize(Decimal(1).scaleb(-places), ROUND_HALF_UP)


def round_allocation(a, places=2):
    """
    Round each asset percentage (stocks, bonds, cash) to a fixed number of decimal places.

    parameters:
    - a: dict – allocation in percent, e.g. {"stocks": 50.0, "bonds": 26.923, "cash": 23.077}.
    - places: int – number of decimal places to round to (default = 2).

    returns:
    - dict – new allocation where all components are rounded floats that sum to 100.

    notes:
    - Any rounding drift is absorbed by 'cash' so the total stays exactly 100.
    - If that would push cash below zero, the drift goes to the largest class instead.
    """
    parts = {k: _quantize(a[k], places) for k in ("stocks", "bonds", "cash")}
    drift = TOTAL_PCT - sum(parts.values())
    if drift:
        target = "cash" if parts["cash"] + drift >= 0 else max(parts, key=parts.get)
        parts[target] += drift
    return {k: float(v) for k, v in parts.items()}


def move_to_cash(a, from_key: str, amount, places=2):
    """
    Shift `amount` percentage points from one class into cash with exact decimal arithmetic.

    returns:
    - dict – new allocation; the input is left untouched.
    """
    delta = _quantize(amount, places)
    out = {k: _quantize(v, places) for k, v in a.items()}
    out[from_key] -= delta
    out["cash"] += delta
    return {k: float(v) for k, v in out.items()}


def round_currency(x) -> int:
    """
    Round a currency amount half-up to the nearest whole unit.

    raises:
    - ValueError – for NaN or infinity (e.g. a projection that overflowed float range).
    """
    if not math.isfinite(x):
        raise ValueError(f"Cannot round non-finite currency amount {x!r}")
    return int(_quantize(x, 0))


def round_pct(x, places=2) -> float:
    return float(_quantize(x, places))
