import json
from unittest.mock import MagicMock, AsyncMock

import httpx
import pytest

from recipevault.ai.prompts import GenerationPreferences
from recipevault.errors import ServerError, ParsingError, InvalidResponse
from recipevault.parsing import Difficulty, NormalizedRecipe
from recipevault.services.ocr import TextRecognizer
from recipevault.services.pipeline import RecipePipeline, ExtractionStrategy
from tests.helpers import TEA_HTML, MARKUP_HTML, mock_http_client, generation_response

URL = "https://example.com/recipe"


def _html_handler(html: str, status_code: int = 200):
    return lambda request: httpx.Response(status_code, content=html.encode("utf-8"))


class StaticRecognizer(TextRecognizer):
    def __init__(self, lines):
        super().__init__()
        self.lines = lines

    async def recognize(self, image: bytes):
        return self.lines


@pytest.mark.asyncio
async def test_from_url_structured_data(generation_client):
    async with mock_http_client(_html_handler(TEA_HTML)) as client:
        pipeline = RecipePipeline(generation_client=generation_client, http_client=client)
        recipe = await pipeline.from_url(URL)

    assert recipe.title == "Tea"
    assert len(recipe.ingredients) == 2
    assert [s.step_number for s in recipe.instructions] == [1, 2]
    assert recipe.prep_time_minutes == 2
    assert recipe.cook_time_minutes == 3
    assert recipe.difficulty == Difficulty.EASY
    assert recipe.servings == 1


@pytest.mark.asyncio
async def test_from_url_falls_back_to_markup(generation_client):
    async with mock_http_client(_html_handler(MARKUP_HTML)) as client:
        pipeline = RecipePipeline(generation_client=generation_client, http_client=client)
        recipe = await pipeline.from_url(URL)

    assert recipe.title == "Grandma's Beef Stew"
    assert recipe.categories == ["Extracted"]


@pytest.mark.asyncio
async def test_from_url_nothing_found_is_parsing_error(generation_client):
    html = '<h1>Blog</h1><li class="ingredient">Only ingredients</li>'
    async with mock_http_client(_html_handler(html)) as client:
        pipeline = RecipePipeline(generation_client=generation_client, http_client=client)
        with pytest.raises(ParsingError):
            await pipeline.from_url(URL)


@pytest.mark.asyncio
async def test_fetch_failure_aborts_before_extractors(generation_client):
    structured = MagicMock(return_value=None)
    markup = MagicMock(return_value=None)
    strategies = [ExtractionStrategy("structured_data", structured), ExtractionStrategy("markup", markup)]

    async with mock_http_client(_html_handler(MARKUP_HTML, status_code=404)) as client:
        pipeline = RecipePipeline(strategies=strategies, generation_client=generation_client, http_client=client)
        with pytest.raises(ServerError):
            await pipeline.from_url(URL)

    structured.assert_not_called()
    markup.assert_not_called()


@pytest.mark.asyncio
async def test_strategies_stop_at_first_hit(generation_client):
    found = NormalizedRecipe(title="Found")
    first = MagicMock(return_value=None)
    second = MagicMock(return_value=found)
    third = MagicMock(return_value=NormalizedRecipe(title="Never"))
    strategies = [ExtractionStrategy(n, f) for n, f in [("a", first), ("b", second), ("c", third)]]

    async with mock_http_client(_html_handler("<html></html>")) as client:
        pipeline = RecipePipeline(strategies=strategies, generation_client=generation_client, http_client=client)
        recipe = await pipeline.from_url(URL)

    assert recipe is found
    first.assert_called_once_with("<html></html>", URL)
    third.assert_not_called()


@pytest.mark.asyncio
async def test_strategy_exception_is_not_swallowed(generation_client):
    broken = MagicMock(side_effect=ValueError("bug"))
    fallback = MagicMock(return_value=NormalizedRecipe(title="Fallback"))
    strategies = [ExtractionStrategy("broken", broken), ExtractionStrategy("fallback", fallback)]

    async with mock_http_client(_html_handler("<html></html>")) as client:
        pipeline = RecipePipeline(strategies=strategies, generation_client=generation_client, http_client=client)
        with pytest.raises(ValueError):
            await pipeline.from_url(URL)

    fallback.assert_not_called()


@pytest.mark.asyncio
async def test_from_text_sends_prompt_and_parses(generation_client):
    seen = {}

    def handler(request: httpx.Request):
        seen["prompt"] = json.loads(request.content)["prompt"]
        return generation_response({
            "title": "Menemen",
            "ingredients": [{"name": "yumurta", "quantity": 3, "unit": "adet"}],
            "instructions": [{"text": "Pişirin."}],
        })

    async with mock_http_client(handler) as client:
        pipeline = RecipePipeline(generation_client=generation_client, http_client=client)
        recipe = await pipeline.from_text("Menemen\n3 adet yumurta")

    assert "Menemen\n3 adet yumurta" in seen["prompt"]
    assert recipe.title == "Menemen"
    assert recipe.ingredients[0].unit == "adet"
    assert recipe.instructions[0].step_number == 1


@pytest.mark.asyncio
async def test_from_text_server_error(generation_client):
    async with mock_http_client(lambda request: httpx.Response(502)) as client:
        pipeline = RecipePipeline(generation_client=generation_client, http_client=client)
        with pytest.raises(ServerError):
            await pipeline.from_text("anything")


@pytest.mark.asyncio
async def test_from_text_missing_wrapper(generation_client):
    async with mock_http_client(lambda request: httpx.Response(200, json={"error": "quota"})) as client:
        pipeline = RecipePipeline(generation_client=generation_client, http_client=client)
        with pytest.raises(InvalidResponse):
            await pipeline.from_text("anything")


@pytest.mark.asyncio
async def test_from_preferences_requires_idea_or_ingredients():
    generation_client = MagicMock()
    generation_client.complete = AsyncMock()
    pipeline = RecipePipeline(generation_client=generation_client)

    with pytest.raises(ParsingError):
        await pipeline.from_preferences(GenerationPreferences(cuisine="Italian"))
    generation_client.complete.assert_not_called()


@pytest.mark.asyncio
async def test_from_preferences_builds_prompt():
    generation_client = MagicMock()
    generation_client.complete = AsyncMock(return_value={"coverLetter": {"title": "Pasta"}})
    pipeline = RecipePipeline(generation_client=generation_client)

    recipe = await pipeline.from_preferences(GenerationPreferences(idea="pasta", cuisine="Italian"))

    assert recipe.title == "Pasta"
    prompt = generation_client.complete.call_args.args[0]
    assert "Recipe idea: pasta" in prompt
    assert "Cuisine: Italian" in prompt
    assert "Meal type" not in prompt


@pytest.mark.asyncio
async def test_from_image_uses_recognized_text():
    generation_client = MagicMock()
    generation_client.complete = AsyncMock(return_value={"coverLetter": {"title": "Pilav"}})
    pipeline = RecipePipeline(generation_client=generation_client)

    recipe = await pipeline.from_image(b"jpeg", StaticRecognizer(["Pilav", "1 su bardağı pirinç"]))

    assert recipe.title == "Pilav"
    assert "Pilav\n1 su bardağı pirinç" in generation_client.complete.call_args.args[0]


@pytest.mark.asyncio
async def test_from_image_empty_text_is_parsing_error():
    generation_client = MagicMock()
    generation_client.complete = AsyncMock()
    pipeline = RecipePipeline(generation_client=generation_client)

    with pytest.raises(ParsingError):
        await pipeline.from_image(b"jpeg", StaticRecognizer(["", "  "]))
    generation_client.complete.assert_not_called()


def test_recognizer_default_languages():
    recognizer = StaticRecognizer([])
    assert recognizer.languages == ["en-US", "tr-TR"]
    assert recognizer.use_language_correction is True
