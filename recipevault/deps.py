"""FastAPI dependencies for RecipeVault API.

Provides:
- Ingestion pipeline dependency (overridable in tests)
"""

from .services.pipeline import RecipePipeline


def get_pipeline() -> RecipePipeline:
    """A fresh pipeline per request; invocations share no mutable state."""
    return RecipePipeline()
