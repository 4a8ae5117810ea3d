"""
Configuration management for the flight app.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass
from typing import List, Union

from dotenv import load_dotenv

load_dotenv()


def _parse_origins(value: str) -> Union[str, List[str]]:
    """Parse a comma separated origin list, or '*' for any origin."""
    value = (value or '').strip()
    if not value or value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


@dataclass(frozen=True)
class ServerConfig:
    """Development server settings."""
    host: str = os.getenv('HOST', '0.0.0.0')
    port: int = int(os.getenv('PORT', '3000'))


@dataclass(frozen=True)
class CorsConfig:
    """Cross-origin settings for the JSON endpoints."""
    origins: Union[str, List[str]] = '*'


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    server: ServerConfig
    cors: CorsConfig

    # Flask settings
    secret_key: str
    debug: bool


def load_config() -> AppConfig:
    """Load all configuration from the environment."""
    return AppConfig(
        server=ServerConfig(),
        cors=CorsConfig(origins=_parse_origins(os.getenv('CORS_ORIGINS', '*'))),
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
