from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from docfinder.api.routes.search import router as search_router
from docfinder.core.config import settings
from docfinder.core.exceptions.search import RateLimitExceededError
from docfinder.core.logger import logger
from docfinder.core.utils.rate_limiter import RateLimiter


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Управление жизненным циклом приложения"""
    logger.info("Запуск DocFinder API...")
    yield
    logger.info("DocFinder API остановлен.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API для поиска ключевых слов по PDF документам",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Лимит запросов хранится в состоянии приложения
app.state.rate_limiter = RateLimiter(
    max_requests=settings.RATE_LIMIT_REQUESTS,
    window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # В продакшене указать конкретные домены
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключение роутеров
app.include_router(search_router)


@app.exception_handler(RateLimitExceededError)
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceededError):
    """Ответ 429 при превышении лимита запросов"""
    logger.warning(f"Превышен лимит запросов для {exc.identifier}")
    return JSONResponse(status_code=429, content={"detail": str(exc)})


@app.get("/")
async def root():
    """Корневой эндпоинт API"""
    return {
        "message": "DocFinder API",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Проверка состояния API"""
    return {"status": "healthy"}
