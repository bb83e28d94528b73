"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

DEFAULT_PATH = (
    "M-2.18557e-06 50"
    "C-9.78513e-07 77.6142 22.3858 100 50 100"
    "L50 -2.18557e-06"
    "C22.3858 -9.78513e-07 -3.39263e-06 22.3858 -2.18557e-06 50"
    "Z"
)


class Settings(BaseSettings):
    pathnorm_log_level: str = "warning"

    # Path converted when none is given on the command line
    pathnorm_default_path: str = DEFAULT_PATH

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
