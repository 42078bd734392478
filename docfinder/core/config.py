from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки приложения"""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILE: str = "app.log"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Application
    DEBUG: bool = True
    PROJECT_NAME: str = "DocFinder"

    # Keyword search
    DEFAULT_CONTEXT_LENGTH: int = 50  # символов с каждой стороны совпадения
    MAX_CONTEXT_LENGTH: int = 1000
    MAX_KEYWORD_LENGTH: int = 500

    # Results pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # File Upload
    MAX_FILE_SIZE: int = 209715200  # 200MB в байтах
    MAX_FILES: int = 10
    MAX_FILENAME_LENGTH: int = 255
    ALLOWED_FILE_TYPES: List[str] = ["pdf"]

    # Rate limiting
    RATE_LIMIT_REQUESTS: int = 10
    RATE_LIMIT_WINDOW_SECONDS: float = 60.0

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"


settings = Settings()
