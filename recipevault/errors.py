from typing import Optional


class RecipeError(Exception):
    """Base exception for recipe ingestion failures."""
    message = "Recipe ingestion failed"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(detail or self.message)


class InvalidURL(RecipeError):
    """Input could not be parsed as an http(s) URL."""
    message = "Invalid URL"


class ServerError(RecipeError):
    """Source site or generation endpoint answered with a non-success status."""
    message = "Server error occurred"

    def __init__(self, detail: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(detail)


class InvalidResponse(RecipeError):
    """Body could not be decoded as the expected text or JSON shape."""
    message = "Invalid response from server"


class ParsingError(RecipeError):
    """No extraction strategy produced a usable recipe."""
    message = "Failed to parse recipe data"
