"""
Configuración centralizada del cliente.

Este módulo maneja todas las variables de entorno y configuraciones
del cliente WooCommerce usando Pydantic Settings para validación automática.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from woocommerce_api.version import get_version


class Settings(BaseSettings):
    """
    Configuración del cliente usando Pydantic Settings.

    Todas las configuraciones se cargan desde variables de entorno
    con valores por defecto apropiados para desarrollo.
    """

    # === CONFIGURACIÓN BÁSICA ===
    APP_NAME: str = "WooCommerce API Client"
    APP_VERSION: str = Field(default_factory=get_version)
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # === CONFIGURACIÓN DE WOOCOMMERCE ===
    WOOCOMMERCE_BASE_URL: str = Field(default="https://example.com")
    WOOCOMMERCE_API_PATH: str = Field(default="/wp-json/wc/v3")
    WOOCOMMERCE_CONSUMER_KEY: str = Field(default="ck_change_me")
    WOOCOMMERCE_CONSUMER_SECRET: str = Field(default="cs_change_me")
    # Sustituye todas las llamadas de red por datos sintéticos
    WOOCOMMERCE_USE_FAKER: bool = Field(default=False)
    # Máximo declarado por el servidor para per_page (solo informativo)
    WOOCOMMERCE_PER_PAGE_MAX: int = Field(default=100)
    WOOCOMMERCE_DEFAULT_PER_PAGE: int = Field(default=10)

    # === CONFIGURACIÓN HTTP ===
    HTTP_TIMEOUT_SECONDS: float = Field(default=30.0)
    HTTP_CONNECT_TIMEOUT_SECONDS: float = Field(default=10.0)
    HTTP_POOL_LIMIT: int = Field(default=100)

    # === CONFIGURACIÓN DE LOGGING ===
    LOG_FILE_PATH: Optional[str] = Field(default=None)
    LOG_MAX_SIZE_MB: int = Field(default=10)
    LOG_BACKUP_COUNT: int = Field(default=5)
    LOG_FORMAT: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }

    @field_validator("WOOCOMMERCE_BASE_URL")
    @classmethod
    def validate_base_url(cls, v):
        """Valida la URL base de la tienda y elimina la barra final."""
        if not v.startswith(("http://", "https://")):
            v = f"https://{v}"
        return v.rstrip("/")

    @field_validator("WOOCOMMERCE_API_PATH")
    @classmethod
    def validate_api_path(cls, v):
        """Normaliza la ruta de la API para que empiece con '/'."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = f"/{v}"
        return v

    @field_validator("WOOCOMMERCE_PER_PAGE_MAX", "WOOCOMMERCE_DEFAULT_PER_PAGE", "HTTP_POOL_LIMIT")
    @classmethod
    def validate_positive(cls, v):
        """Valida que los límites sean positivos."""
        if v < 1:
            raise ValueError("El valor debe ser mayor o igual a 1")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Valida que el nivel de log sea válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL debe ser uno de: {valid_levels}")
        return v.upper()

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Valida que el entorno sea válido."""
        valid_envs = ["development", "staging", "production", "testing"]
        if v.lower() not in valid_envs:
            raise ValueError(f"ENVIRONMENT debe ser uno de: {valid_envs}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        """Verifica si está en entorno de producción."""
        return self.ENVIRONMENT == "production"

    @property
    def api_base_url(self) -> str:
        """URL base de la API REST (tienda + ruta de la API)."""
        return f"{self.WOOCOMMERCE_BASE_URL}{self.WOOCOMMERCE_API_PATH}"

    def get_default_headers(self) -> dict:
        """
        Obtiene headers por defecto para requests a WooCommerce.

        Returns:
            dict: Headers comunes
        """
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"{self.APP_NAME}/{self.APP_VERSION}",
        }


@lru_cache()
def get_settings() -> Settings:
    """
    Obtiene instancia singleton de configuración.

    Usa LRU cache para evitar recrear la configuración
    múltiples veces durante la ejecución.

    Returns:
        Settings: Instancia de configuración
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Recarga la configuración (útil para testing).

    Returns:
        Settings: Nueva instancia de configuración
    """
    get_settings.cache_clear()
    return get_settings()


def get_environment_info() -> dict:
    """
    Obtiene información del entorno actual.

    Returns:
        dict: Información del entorno
    """
    settings = get_settings()

    return {
        "app_name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "debug": settings.DEBUG,
        "api_base_url": settings.api_base_url,
        "log_level": settings.LOG_LEVEL,
        "features": {
            "faker": settings.WOOCOMMERCE_USE_FAKER,
            "file_logging": bool(settings.LOG_FILE_PATH),
        },
    }
