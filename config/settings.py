from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


class Settings:
    """Application settings loaded from environment variables.

    Both the API server and the storefront client read from here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "3000"))
    static_root: str = os.getenv("STATIC_ROOT", "website")
    index_document: str = os.getenv("INDEX_DOCUMENT", "index.html")
    api_base_url: str = os.getenv("API_BASE_URL", "http://127.0.0.1:3000")
    countdown_interval: float = float(os.getenv("COUNTDOWN_INTERVAL", "1.0"))
    local_store_path: str = os.getenv("LOCAL_STORE_PATH", "data/local_storage.json")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
