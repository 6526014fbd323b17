"""Generation run exports."""

from .generation_use_case import GenerationError, execute_schema_generation
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationError",
    "GenerationOutcome",
    "GenerationRequest",
    "execute_schema_generation",
]
