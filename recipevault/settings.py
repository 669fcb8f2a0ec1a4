from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Generation endpoint (Cloudflare worker fronting the model)
    generation_endpoint_url: str = "https://recipeappphotoparser.green-snow-173b.workers.dev/"
    generation_wrapper_field: str = "coverLetter"
    generation_max_tokens: int = 1500
    generation_timeout_s: float = 30.0

    # Page fetching
    fetch_timeout_s: float = 10.0
    fetch_user_agent: str = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"
    fetch_accept: str = "text/html,application/xhtml+xml,application/xml;q=0.9"

    # OCR collaborator
    ocr_languages: list[str] = ["en-US", "tr-TR"]

    # Inbound API
    rate_limit: str = "100/minute"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
