"""Runtime configuration loading from environment and optional .env file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_FILE = "logs/app.log"
DEFAULT_MAX_RENDER_SEGMENTS = 20000


class ConfigError(Exception):
    """Configuration loading error with user-facing message text."""


@dataclass(frozen=True)
class AppConfig:
    """Application config for the UI server and result rendering."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_file: Path = Path(DEFAULT_LOG_FILE)
    max_render_segments: int = DEFAULT_MAX_RENDER_SEGMENTS


_QUOTES = ("'", '"')


def read_dotenv(dotenv_path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines from a dotenv file; a missing file yields ``{}``.

    Blank lines and ``#`` comments are skipped, an ``export `` prefix is allowed,
    and one pair of matching quotes around the value is removed.
    """
    if not dotenv_path.is_file():
        return {}

    values: dict[str, str] = {}
    for raw_line in dotenv_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, separator, value = line.partition("=")
        key = key.strip()
        if not separator or not key or key.startswith("#"):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
            value = value[1:-1]
        values[key] = value
    return values


def _optional_env(name: str) -> str | None:
    value = os.environ.get(name)
    if value is None:
        return None
    normalized = value.strip()
    return normalized or None


def _int_env(name: str, default: int, *, minimum: int, maximum: int | None = None) -> int:
    value = _optional_env(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ConfigError(
            f"Configuration error: {name} must be a valid integer, got {value!r}."
        ) from exc
    if parsed < minimum or (maximum is not None and parsed > maximum):
        bounds = f">= {minimum}" if maximum is None else f"between {minimum} and {maximum}"
        raise ConfigError(f"Configuration error: {name} must be {bounds}, got {parsed}.")
    return parsed


def get_config() -> AppConfig:
    """Load config from environment variables and `.env` in the working directory."""
    for key, value in read_dotenv(Path(".env")).items():
        os.environ.setdefault(key, value)

    return AppConfig(
        host=_optional_env("DIFF_CHECKER_HOST") or DEFAULT_HOST,
        port=_int_env("DIFF_CHECKER_PORT", DEFAULT_PORT, minimum=1, maximum=65535),
        log_file=Path(_optional_env("DIFF_CHECKER_LOG_FILE") or DEFAULT_LOG_FILE),
        max_render_segments=_int_env(
            "DIFF_CHECKER_MAX_RENDER_SEGMENTS",
            DEFAULT_MAX_RENDER_SEGMENTS,
            minimum=1,
        ),
    )
