from pathlib import Path

from dotenv import dotenv_values
from pydantic_settings import BaseSettings

_ENV_FILE = Path.home() / "env" / ".env.dev"
_env_vars = dotenv_values(str(_ENV_FILE)) if _ENV_FILE.exists() else {}


class Settings(BaseSettings):
    app_name: str = "Andy's Book Store"
    debug: bool = False
    log_level: str = "INFO"
    google_books_url: str = "https://www.googleapis.com/books/v1/volumes"
    google_api_key: str = ""
    http_timeout: float = 10.0

    model_config = {
        "env_prefix": "BOOKSEARCH_",
        "env_file": ".env",
        "extra": "ignore",
    }

    def model_post_init(self, __context):
        if not self.google_api_key:
            self.google_api_key = _env_vars.get("GOOGLE_API_KEY", "") or ""


settings = Settings()
