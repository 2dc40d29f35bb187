"""
Application Settings.

Centraliza toda configuração via .env / variáveis de ambiente (prefixo IDCHECK_).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configurações carregadas de variáveis de ambiente."""

    # --- App ---
    env: str = "development"
    debug: bool = True
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    # --- Rules ---
    rules_version: str = "1.0.0"
    strict_password: bool = False        # require a special character on /validate/fields

    model_config = {
        "env_prefix": "IDCHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Singleton de settings."""
    return Settings()
