from fastapi import Depends, Request

from docfinder.core.exceptions.search import RateLimitExceededError
from docfinder.core.utils.rate_limiter import RateLimiter
from docfinder.services.file_service import FileService
from docfinder.services.search_service import SearchService


def get_file_service() -> FileService:
    """Dependency для получения файлового сервиса"""
    return FileService()


def get_search_service(
    file_service: FileService = Depends(get_file_service),
) -> SearchService:
    """Dependency для получения сервиса поиска"""
    return SearchService(file_service=file_service)


def get_rate_limiter(request: Request) -> RateLimiter:
    """Ограничитель запросов, принадлежащий экземпляру приложения"""
    return request.app.state.rate_limiter


async def enforce_rate_limit(
    request: Request,
    rate_limiter: RateLimiter = Depends(get_rate_limiter),
) -> None:
    """
    Проверка лимита запросов по адресу клиента

    Raises:
        RateLimitExceededError: Если клиент превысил лимит
    """
    identifier = request.client.host if request.client else "anonymous"
    if not rate_limiter.check(identifier):
        raise RateLimitExceededError(
            identifier, rate_limiter.max_requests, rate_limiter.window_seconds
        )
