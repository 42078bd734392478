from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from docfinder.api.dependencies import enforce_rate_limit, get_search_service
from docfinder.core.config import settings
from docfinder.core.exceptions.file import FileValidationError, TextExtractionError
from docfinder.core.exceptions.search import SearchError
from docfinder.core.logger import logger
from docfinder.core.models.file import FileContent
from docfinder.core.models.search import SearchOptions
from docfinder.schemas.search import (
    MatchSchema,
    ProcessingStatus,
    SearchMeta,
    SearchResponse,
    StatisticsSchema,
)
from docfinder.services.search_service import SearchService

router = APIRouter(prefix="/api/v1/search", tags=["search"])


@router.post(
    "", response_model=SearchResponse, dependencies=[Depends(enforce_rate_limit)]
)
async def search_keyword(
    files: List[UploadFile] = File(..., description="PDF файлы для поиска"),
    keyword: str = Form(
        ..., description="Ключевое слово", max_length=settings.MAX_KEYWORD_LENGTH
    ),
    case_sensitive: bool = Form(False, description="Учитывать регистр"),
    whole_word: bool = Form(False, description="Только целые слова"),
    max_context_length: int = Form(
        settings.DEFAULT_CONTEXT_LENGTH,
        description="Размер контекста (символов) с каждой стороны",
        ge=0,
        le=settings.MAX_CONTEXT_LENGTH,
    ),
    document_name: Optional[str] = Form(None, description="Фильтр по документу"),
    page: int = Form(1, description="Номер страницы результатов", ge=1),
    page_size: int = Form(
        settings.DEFAULT_PAGE_SIZE,
        description="Размер страницы результатов",
        ge=1,
        le=settings.MAX_PAGE_SIZE,
    ),
    search_service: SearchService = Depends(get_search_service),
) -> SearchResponse:
    """
    Поиск ключевого слова в загруженных PDF файлах

    Args:
    - files: PDF файлы (не более MAX_FILES)
    - keyword: Ключевое слово (обязательный параметр)
    - case_sensitive: Учитывать регистр (опционально)
    - whole_word: Только целые слова (опционально)
    - max_context_length: Размер контекста в символах (опционально)
    - document_name: Оставить совпадения одного документа (опционально)
    - page, page_size: Пагинация результатов (опционально)

    Returns:
    - SearchResponse: Совпадения текущей страницы и статистика

    Raises:
    - HTTPException: 400 - Пустой запрос или некорректный файл
    - HTTPException: 422 - Не удалось извлечь текст из PDF
    - HTTPException: 500 - Внутренняя ошибка сервера
    """
    try:
        uploads = []
        for file in files:
            # Проверяем, что файл имеет имя
            if not file.filename:
                raise HTTPException(
                    status_code=400, detail="Имя файла не может быть пустым"
                )
            uploads.append(
                FileContent(
                    filename=file.filename,
                    content=await file.read(),
                    content_type=file.content_type or "application/pdf",
                )
            )

        options = SearchOptions(
            case_sensitive=case_sensitive,
            whole_word=whole_word,
            max_context_length=max_context_length,
        )
        result = await search_service.search_files(
            uploads, keyword, options, document_name, page, page_size
        )

        return SearchResponse(
            status=ProcessingStatus.SUCCESS,
            meta=SearchMeta(
                keyword=keyword,
                case_sensitive=case_sensitive,
                whole_word=whole_word,
                max_context_length=max_context_length,
                document_name=document_name,
                page=result.page,
                page_size=result.page_size,
                total_pages=result.total_pages,
                documents=result.documents,
                statistics=StatisticsSchema.from_statistics(result.statistics),
            ),
            results=[MatchSchema.from_match(match) for match in result.matches],
        )
    except HTTPException:
        raise
    except (SearchError, FileValidationError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TextExtractionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Неожиданная ошибка при поиске: {e}")
        raise HTTPException(
            status_code=500, detail=f"Внутренняя ошибка сервера: {str(e)}"
        )
