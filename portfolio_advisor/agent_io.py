"""
I/O helpers for schemas and payload validation.

PURPOSE: Central place for JSON schema validation of user profiles and prediction
         results, plus readable error messages for the CLI.
CONTEXT: The pure engine never validates; run_pipeline() and the CLI call these helpers
         at the boundary so bad input fails fast instead of producing NaN output.
"""

from __future__ import annotations

import json
import math
import os
import pathlib
from functools import lru_cache
from typing import Any, Dict

from jsonschema import Draft7Validator, ValidationError

PACKAGE_SCHEMAS = pathlib.Path(__file__).resolve().parent / "schemas"

NUMERIC_PROFILE_FIELDS = ("age", "income", "savings", "risk_score")


# -------------------- Schema loading utilities -------------------- #

@lru_cache(maxsize=64)
def _load_schema_cached(abs_path: str) -> Dict[str, Any]:
    """
    Read and parse a JSON schema file, caching it to avoid repeated disk I/O.

    parameters:
    - abs_path: str – full absolute path to the schema file.

    returns:
    - dict – parsed JSON schema content.
    """
    p = pathlib.Path(abs_path)
    text = p.read_text(encoding="utf-8")
    return json.loads(text)


def schema_dir() -> pathlib.Path:
    """Directory holding the JSON schemas; SCHEMA_DIR overrides the copy shipped in the package."""
    return pathlib.Path(os.getenv("SCHEMA_DIR") or PACKAGE_SCHEMAS)


def load_schema(name: str) -> Dict[str, Any]:
    """
    Load a JSON schema by file name (or relative/absolute path), with caching.

    parameters:
    - name: str – e.g. "user_profile.schema.json", or a path such as "/tmp/custom.schema.json".

    returns:
    - dict – schema as a Python dictionary.

    raises:
    - FileNotFoundError – if the file cannot be located.
    - json.JSONDecodeError – if the file is not valid JSON.

    notes:
    - A bare file name is looked up in the schema directory, never in the working directory.
    """
    p = pathlib.Path(name)
    if p.parent == pathlib.Path("."):
        p = schema_dir() / p
    if not p.exists():
        raise FileNotFoundError(f"Schema not found at: {p}")
    return _load_schema_cached(str(p.resolve()))


# -------------------- Validation helpers -------------------- #

def validate_with_schema(instance: Dict[str, Any], schema: Dict[str, Any]) -> None:
    """
    Validate a given instance against a provided schema.

    raises:
    - ValidationError – if instance fails to meet schema requirements.
    """
    Draft7Validator(schema).validate(instance)


def validate_profile(payload: Dict[str, Any]) -> None:
    """
    Validate a user profile payload.

    Schema checks cover presence, types and ranges. NaN and infinity slip through
    JSON-schema range checks, so numeric fields are also required to be finite.
    """
    validate_with_schema(payload, load_schema("user_profile.schema.json"))
    for field in NUMERIC_PROFILE_FIELDS:
        if not math.isfinite(payload[field]):
            raise ValidationError(f"{payload[field]!r} is not a finite number", path=(field,))


def validate_prediction_result(result: Dict[str, Any]) -> None:
    """Validate a PredictionResult before handing it to consumers."""
    validate_with_schema(result, load_schema("prediction_result.schema.json"))


# -------------------- Error formatting -------------------- #

def error_to_string(err: Exception) -> str:
    """
    Convert exceptions into readable strings for user-facing error messages.

    returns:
    - str – descriptive message with the JSON path if it is a ValidationError,
      e.g. "-5 is less than the minimum of 18 at $.age".
    """
    if isinstance(err, ValidationError):
        path = "$" + "".join(f"[{repr(p)}]" if isinstance(p, int) else f".{p}" for p in err.path)
        return f"{err.message} at {path}"
    return f"{type(err).__name__}: {err}"


__all__ = [
    "load_schema",
    "validate_with_schema",
    "validate_profile",
    "validate_prediction_result",
    "error_to_string",
    "ValidationError",
]
