import os
from dataclasses import dataclass
from typing import Optional

from errors import ConfigError

DEFAULT_API_BASE = 'https://pokeapi.co/api/v2'


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    api_base: str = DEFAULT_API_BASE
    batch_size: int = 40
    render_delay: float = 0.0
    http_timeout: float = 10.0
    max_workers: int = 10
    theme_file: str = os.path.join(os.path.expanduser('~'), '.pokedex_theme.json')
    viewport_width: int = 1024
    log_level: str = 'INFO'
    metrics_port: Optional[int] = None

    @classmethod
    def from_env(cls):
        """Build settings from POKEDEX_* environment variables, falling back to defaults."""
        defaults = cls()
        settings = cls(
            api_base=os.getenv('POKEDEX_API_BASE', defaults.api_base).rstrip('/'),
            batch_size=_env_int('POKEDEX_BATCH_SIZE', defaults.batch_size),
            render_delay=_env_float('POKEDEX_RENDER_DELAY', defaults.render_delay),
            http_timeout=_env_float('POKEDEX_HTTP_TIMEOUT', defaults.http_timeout),
            max_workers=_env_int('POKEDEX_MAX_WORKERS', defaults.max_workers),
            theme_file=os.getenv('POKEDEX_THEME_FILE', defaults.theme_file),
            viewport_width=_env_int('POKEDEX_VIEWPORT_WIDTH', defaults.viewport_width),
            log_level=os.getenv('POKEDEX_LOG_LEVEL', defaults.log_level).upper(),
            metrics_port=_env_int('POKEDEX_METRICS_PORT', None),
        )
        if settings.batch_size < 1:
            raise ConfigError('POKEDEX_BATCH_SIZE must be at least 1')
        if settings.max_workers < 1:
            raise ConfigError('POKEDEX_MAX_WORKERS must be at least 1')
        if settings.render_delay < 0:
            raise ConfigError('POKEDEX_RENDER_DELAY cannot be negative')
        return settings
