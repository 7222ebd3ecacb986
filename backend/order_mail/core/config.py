"""
Configuración centralizada de la aplicación
"""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    APP_NAME: str = "Order Mail Models"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Fee allocation precision
    # FEE_RATIO_SCALE: fractional digits of the shipping share (ship / sum)
    # FEE_SCALE: fractional digits of the per-unit fees
    FEE_RATIO_SCALE: int = 5
    FEE_SCALE: int = 2

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
