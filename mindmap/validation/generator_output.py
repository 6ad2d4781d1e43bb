"""Turn raw generator text into a validated semantic tree."""

import json
import re

from mindmap.validation.tree_validator import (
    ValidationResult,
    ViolationKind,
    validate_tree,
)

_FENCE = re.compile(r"^```(?:json)?\s*\n?|\n?```\s*$")


def strip_code_fences(text: str) -> str:
    """Remove a Markdown code fence wrapped around a JSON payload."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE.sub("", cleaned).strip()
    return cleaned


def parse_generator_output(text: str) -> ValidationResult:
    """Parse generator output and validate it as a semantic tree.

    Malformed JSON is reported as an invalid_json violation so the caller can
    ask the generator to repair its output.
    """
    try:
        payload = json.loads(strip_code_fences(text))
    except json.JSONDecodeError as exc:
        return ValidationResult.rejected(
            ViolationKind.invalid_json, f"invalid JSON response: {exc.msg}"
        )
    return validate_tree(payload)
