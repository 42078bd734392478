from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from docfinder.core.models.search import KeywordMatch, MatchStatistics
from docfinder.core.utils.highlighter import context_info, render_highlight


class ProcessingStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class MatchContext(BaseModel):
    """Контекстное окно совпадения"""

    text: str = Field(..., description="Контекст до + совпадение + контекст после")
    length: int = Field(..., description="Длина контекстного текста")
    highlight_start: int = Field(..., description="Позиция выделения в контексте")
    highlight_length: int = Field(..., description="Длина выделенного текста")


class MatchSchema(BaseModel):
    """Найденное вхождение ключевого слова"""

    keyword: str = Field(..., description="Ключевое слово")
    document_name: str = Field(..., description="Имя документа")
    page_number: int = Field(..., description="Номер страницы, с 1")
    line_number: int = Field(..., description="Номер строки на странице, с 1")
    column_start: int = Field(..., description="Начало совпадения в строке, с 0")
    column_end: int = Field(..., description="Конец совпадения в строке (не включая)")
    matched_text: str = Field(..., description="Найденный текст")
    context_before: str = Field(..., description="Контекст до совпадения")
    context_after: str = Field(..., description="Контекст после совпадения")
    full_line: str = Field(..., description="Строка целиком")
    highlighted_html: str = Field(..., description="Экранированная разметка с <mark>")
    context: MatchContext = Field(..., description="Контекст вокруг совпадения")

    @classmethod
    def from_match(cls, match: KeywordMatch) -> "MatchSchema":
        info = context_info(match)
        return cls(
            keyword=match.keyword,
            document_name=match.document_name,
            page_number=match.page_number,
            line_number=match.line_number,
            column_start=match.column_start,
            column_end=match.column_end,
            matched_text=match.matched_text,
            context_before=match.context_before,
            context_after=match.context_after,
            full_line=match.full_line,
            highlighted_html=render_highlight(match),
            context=MatchContext(
                text=info.text,
                length=info.length,
                highlight_start=info.highlight_start,
                highlight_length=info.highlight_length,
            ),
        )


class PageMatchCount(BaseModel):
    """Количество совпадений на странице документа"""

    document_name: str
    page_number: int
    count: int


class StatisticsSchema(BaseModel):
    """Статистика по совпадениям"""

    total_matches: int = Field(..., description="Общее количество совпадений")
    documents_with_matches: int = Field(..., description="Документов с совпадениями")
    pages_with_matches: int = Field(..., description="Страниц с совпадениями")
    matches_by_document: Dict[str, int] = Field(
        default_factory=dict, description="Совпадений по документам"
    )
    matches_by_page: List[PageMatchCount] = Field(
        default_factory=list, description="Совпадений по страницам"
    )

    @classmethod
    def from_statistics(cls, statistics: MatchStatistics) -> "StatisticsSchema":
        return cls(
            total_matches=statistics.total_matches,
            documents_with_matches=statistics.documents_with_matches,
            pages_with_matches=statistics.pages_with_matches,
            matches_by_document=statistics.matches_by_document,
            matches_by_page=[
                PageMatchCount(document_name=name, page_number=page_number, count=count)
                for (name, page_number), count in statistics.matches_by_page.items()
            ],
        )


class SearchMeta(BaseModel):
    """Метаинформация о поиске"""

    keyword: str = Field(..., description="Ключевое слово")
    case_sensitive: bool = Field(..., description="Учет регистра")
    whole_word: bool = Field(..., description="Только целые слова")
    max_context_length: int = Field(..., description="Размер контекста (символов)")
    document_name: Optional[str] = Field(None, description="Фильтр по документу")
    page: int = Field(..., description="Номер страницы результатов")
    page_size: int = Field(..., description="Размер страницы результатов")
    total_pages: int = Field(..., description="Всего страниц результатов")
    documents: List[str] = Field(..., description="Обработанные документы")
    statistics: StatisticsSchema = Field(..., description="Статистика совпадений")


class SearchResponse(BaseModel):
    """Ответ на запрос поиска по документам"""

    status: ProcessingStatus = Field(..., description="Статус обработки")
    meta: SearchMeta = Field(..., description="Метаинформация о поиске")
    results: List[MatchSchema] = Field(..., description="Совпадения текущей страницы")

    class Config:
        use_enum_values = True
