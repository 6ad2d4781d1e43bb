"""Structural validation for semantic trees."""

from mindmap.validation.tree_validator import (
    TreeValidationError,
    TreeViolation,
    ValidationResult,
    ViolationKind,
    validate_tree,
)
from mindmap.validation.generator_output import (
    parse_generator_output,
    strip_code_fences,
)

__all__ = [
    "TreeValidationError",
    "TreeViolation",
    "ValidationResult",
    "ViolationKind",
    "validate_tree",
    "parse_generator_output",
    "strip_code_fences",
]
