import logging
import os

from docfinder.core.config import settings

os.makedirs(settings.LOG_DIR, exist_ok=True)

# Настраиваем логирование один раз при импорте
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format=settings.LOG_FORMAT,
    handlers=[
        logging.FileHandler(f"{settings.LOG_DIR}/{settings.LOG_FILE}"),
        logging.StreamHandler(),
    ],
)

# Создаем глобальный логгер
logger = logging.getLogger("docfinder")
