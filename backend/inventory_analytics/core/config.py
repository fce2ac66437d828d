from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings."""
    
    # App
    APP_NAME: str = "Inventory Analytics"
    DEBUG: bool = True
    
    # Analytics policy
    LOSS_MARGIN_RATE: float = 0.3  # share of shortfall value lost to stockouts
    ALERT_THRESHOLD_DAYS: int = 7
    EMPTY_SNAPSHOT_EFFICIENCY: int = 100
    PREVIEW_LIMIT: int = 3  # items shown on dashboard cards
    
    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
