"""Model layer: contract, errors, helpers."""

from dxrel.model.base import Model
from dxrel.model.errors import (
    MarshalError,
    ModelError,
    ParseError,
    UnmarshalError,
    ValidationError,
)
from dxrel.model.helpers import (
    clone,
    filter_zero,
    from_json,
    from_yaml,
    models_equal,
    must_validate,
    safe_string,
    to_json,
    to_yaml,
    validate_all,
)

__all__ = [
    "MarshalError",
    "Model",
    "ModelError",
    "ParseError",
    "UnmarshalError",
    "ValidationError",
    "clone",
    "filter_zero",
    "from_json",
    "from_yaml",
    "models_equal",
    "must_validate",
    "safe_string",
    "to_json",
    "to_yaml",
    "validate_all",
]
