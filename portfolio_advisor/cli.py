#!/usr/bin/env python3
# PURPOSE: Command-line front end for the advisor engine.
# CONTEXT: Lets you run an analysis locally without a UI; prints the result as JSON
#          (or just the explanation text with --explain).

import argparse
import json
import sys

from portfolio_advisor.agent_io import ValidationError, error_to_string
from portfolio_advisor.logging_setup import configure_logging
from portfolio_advisor.pipeline import run_pipeline

# Same starting values as the profile form.
DEFAULT_PROFILE = {"age": 35, "income": 120000, "savings": 150000, "risk_score": 7.0}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-advisor",
        description="Suggest a stock/bond/cash allocation with projections and insurance tips.",
    )
    parser.add_argument("--age", type=float, default=DEFAULT_PROFILE["age"])
    parser.add_argument("--income", type=float, default=DEFAULT_PROFILE["income"])
    parser.add_argument("--savings", type=float, default=DEFAULT_PROFILE["savings"])
    parser.add_argument("--risk-score", type=float, default=DEFAULT_PROFILE["risk_score"],
                        help="1 (conservative) to 10 (aggressive)")
    parser.add_argument("--life-events", default=None,
                        help='Free text, e.g. "buy a house in 3 years"')
    parser.add_argument("--explain", action="store_true", help="Print only the explanation text")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    log = configure_logging()

    payload = {"age": args.age, "income": args.income, "savings": args.savings, "risk_score": args.risk_score}
    if args.life_events:
        payload["life_events"] = args.life_events

    try:
        out = run_pipeline(payload)
    except ValidationError as e:
        log.warning("request.invalid", error=error_to_string(e))
        print(f"Invalid profile: {error_to_string(e)}", file=sys.stderr)
        return 2

    if args.explain:
        print(out["llm_explanation"])
        if out["compliance_explanation"]:
            print("\n" + out["compliance_explanation"])
    else:
        print(json.dumps(out, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
