"""Recipe ingestion API router.

Endpoints:
- POST /api/recipes/import-url - Extract a recipe from a web page
- POST /api/recipes/scan - Structure text recognized on-device
- POST /api/recipes/generate - Generate a recipe from preferences

All three return a NormalizedRecipe preview; saving is the client's job.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ..ai.prompts import GenerationPreferences
from ..deps import get_pipeline
from ..parsing import NormalizedRecipe
from ..services.pipeline import RecipePipeline

router = APIRouter()
logger = logging.getLogger("recipevault.api")


class ImportURLRequest(BaseModel):
    url: str = Field(..., min_length=1, max_length=2048)


class ScanRequest(BaseModel):
    text: str = Field(..., min_length=1)


@router.post("/recipes/import-url", response_model=NormalizedRecipe)
async def import_url(
    payload: ImportURLRequest,
    pipeline: RecipePipeline = Depends(get_pipeline),
):
    logger.info(f"Import requested for {payload.url}")
    return await pipeline.from_url(payload.url)


@router.post("/recipes/scan", response_model=NormalizedRecipe)
async def scan_text(
    payload: ScanRequest,
    pipeline: RecipePipeline = Depends(get_pipeline),
):
    logger.info(f"Scan requested ({len(payload.text)} chars)")
    return await pipeline.from_text(payload.text)


@router.post("/recipes/generate", response_model=NormalizedRecipe)
async def generate(
    prefs: GenerationPreferences,
    pipeline: RecipePipeline = Depends(get_pipeline),
):
    logger.info(f"Generation requested cuisine={prefs.cuisine} meal_type={prefs.meal_type}")
    return await pipeline.from_preferences(prefs)
