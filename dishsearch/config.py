"""Configuration du service de recherche de plats."""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Configuration de l'application."""

    # Sources de données statiques
    DISHES_PATH: Path = DATA_DIR / "dishes.json"
    RECOMMENDATION_USER_PATH: Path = DATA_DIR / "recommendation_user.json"
    RECOMMENDATION_POPULAR_PATH: Path = DATA_DIR / "recommendation_popular.json"
    DEBUG_CATALOG: bool = False

    # Redis
    REDIS_URL: str = "redis://redis:6379/0"
    CACHE_ENABLED: bool = True
    CACHE_TTL: int = 300

    # Scoring
    DISTANCE_CACHE_SIZE: int = 4096

    # Pagination
    DEFAULT_PER_PAGE: int = 20
    MAX_PER_PAGE: int = 200

    # Accueil
    HOME_ROW_SIZE: int = 5
    FEATURED_DISHES: List[str] = [
        "bacon egg and cheese sandwich",
        "blueberry muffins",
        "homemade pizza",
        "fettuccine alfredo",
        "chicken casserole",
        "stir fry",
    ]

    # Logs
    LOG_DIR: Path = Path("logs")
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
