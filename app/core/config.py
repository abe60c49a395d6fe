"""
Configuration settings for the application
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # App settings
    APP_NAME: str = "Itinerary Search API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database (required - the service refuses to start without it)
    DATABASE_URL: str

    # API settings
    API_V1_PREFIX: str = "/v1"

    # Connection time rules (in minutes)
    MINIMUM_CONNECTION_TIME: int = 480  # 8 hours
    MAXIMUM_CONNECTION_TIME: int = 2880  # 48 hours

    # CORS
    CORS_ORIGINS: list = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
