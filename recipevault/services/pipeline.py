"""Recipe ingestion pipeline.

URL branch:        fetch -> structured data -> markup heuristics -> ParsingError
Generative branch: prompt -> generation endpoint -> response parser

Each call is independent and makes exactly one outbound request. Extractors
signal "not found" with None; exceptions are real failures and are passed
through unchanged.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import httpx

from ..ai.prompts import GenerationPreferences, build_text_prompt, build_preferences_prompt
from ..core.ai_client import GenerationClient
from ..errors import ParsingError
from ..parsing import (
    NormalizedRecipe, extract_structured_recipe, extract_markup_recipe, parse_generation_payload,
)
from .fetcher import fetch_page
from .ocr import TextRecognizer, extract_text

logger = logging.getLogger("recipevault.pipeline")


@dataclass(frozen=True)
class ExtractionStrategy:
    name: str
    extract: Callable[[str, str], Optional[NormalizedRecipe]]


DEFAULT_STRATEGIES = [
    ExtractionStrategy("structured_data", lambda html, url: extract_structured_recipe(html)),
    ExtractionStrategy("markup", extract_markup_recipe),
]


class RecipePipeline:
    def __init__(
        self,
        strategies: Optional[List[ExtractionStrategy]] = None,
        generation_client: Optional[GenerationClient] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.strategies = strategies if strategies is not None else list(DEFAULT_STRATEGIES)
        self.generation_client = generation_client or GenerationClient.get_instance()
        # Shared by both branches when provided; otherwise one client per request
        self.http_client = http_client

    async def from_url(self, url: str) -> NormalizedRecipe:
        html = await fetch_page(url, client=self.http_client)

        for strategy in self.strategies:
            recipe = strategy.extract(html, url)
            if recipe is not None:
                logger.info(f"Extracted '{recipe.title}' from {url} via {strategy.name}")
                return recipe
            logger.info(f"Strategy {strategy.name} found no recipe at {url}")

        raise ParsingError(f"No recipe found at {url}")

    async def from_text(self, text: str) -> NormalizedRecipe:
        return await self._generate(build_text_prompt(text))

    async def from_preferences(self, prefs: GenerationPreferences) -> NormalizedRecipe:
        if not prefs.has_request():
            raise ParsingError("Provide a recipe idea or available ingredients")
        return await self._generate(build_preferences_prompt(prefs))

    async def from_image(self, image: bytes, recognizer: TextRecognizer) -> NormalizedRecipe:
        text = await extract_text(recognizer, image)
        logger.info(f"Recognized {len(text.splitlines())} lines of text")
        return await self.from_text(text)

    async def _generate(self, prompt: str) -> NormalizedRecipe:
        payload = await self.generation_client.complete(prompt, client=self.http_client)
        recipe = parse_generation_payload(payload)
        logger.info(
            f"Generated '{recipe.title}' with {len(recipe.ingredients)} ingredients, "
            f"{len(recipe.instructions)} steps"
        )
        return recipe
