from __future__ import annotations
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from packshot_compositor.app.errors import ConfigError

RESAMPLE_CHOICES = ("nearest", "bilinear", "bicubic", "lanczos")


def _get_env(name: str, default: str | None = None) -> str:
    v = os.getenv(name, default)
    if v is None or v.strip() == "":
        raise ConfigError(f"Missing required env var: {name}")
    return v.strip()


@dataclass(frozen=True)
class Settings:
    # Logging
    log_level: str = "INFO"

    # Rendering
    resample: str = "lanczos"

    # Example script output
    output_dir: str = "artifacts"

    def __post_init__(self) -> None:
        if self.resample not in RESAMPLE_CHOICES:
            raise ConfigError(
                f"COMPOSITOR_RESAMPLE must be one of {', '.join(RESAMPLE_CHOICES)}, got {self.resample!r}"
            )


def load_settings(*, dotenv: bool = True, dotenv_path: str | None = None) -> Settings:
    if dotenv:
        # .env is looked up from the working directory upwards, not from this package
        load_dotenv(dotenv_path or find_dotenv(usecwd=True))

    return Settings(
        log_level=_get_env("COMPOSITOR_LOG_LEVEL", "INFO").upper(),
        resample=_get_env("COMPOSITOR_RESAMPLE", "lanczos").lower(),
        output_dir=_get_env("COMPOSITOR_OUTPUT_DIR", "artifacts"),
    )
