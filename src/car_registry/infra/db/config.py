from __future__ import annotations

import os

DATABASE_URL_ENV = "DATABASE_URL"


def database_url() -> str:
    url = os.getenv(DATABASE_URL_ENV)

    if not url:
        raise RuntimeError(f"{DATABASE_URL_ENV} environment variable is not set")

    return url
