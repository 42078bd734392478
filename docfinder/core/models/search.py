from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from pydantic import BaseModel, Field


class SearchOptions(BaseModel):
    """Параметры поиска по ключевому слову"""

    case_sensitive: bool = False
    whole_word: bool = False
    max_context_length: int = Field(50, ge=0)  # Символов с каждой стороны

    class Config:
        frozen = True


@dataclass(frozen=True)
class KeywordMatch:
    """
    Найденное вхождение ключевого слова.

    Позиции в строке нумеруются с 0, интервал полуоткрытый:
    matched_text == full_line[column_start:column_end]
    """

    keyword: str  # Слово в том виде, в каком его передали в поиск
    document_name: str
    page_number: int
    line_number: int  # Нумерация с 1
    column_start: int
    column_end: int
    matched_text: str
    context_before: str
    context_after: str
    full_line: str

    @property
    def sort_key(self) -> Tuple[str, int, int, int]:
        return (self.document_name, self.page_number, self.line_number, self.column_start)


@dataclass
class MatchStatistics:
    """Сводная статистика по найденным совпадениям"""

    total_matches: int = 0
    documents_with_matches: int = 0
    pages_with_matches: int = 0
    matches_by_document: Dict[str, int] = field(default_factory=dict)
    matches_by_page: Dict[Tuple[str, int], int] = field(default_factory=dict)


@dataclass(frozen=True)
class HighlightSegments:
    """Три части окна совпадения для отображения"""

    before: str
    matched: str
    after: str


@dataclass
class ContextInfo:
    """Информация о контексте фрагмента"""

    text: str  # Полный контекстный текст
    length: int  # Длина контекстного текста
    highlight_start: int  # Позиция выделения в контексте
    highlight_length: int  # Длина выделенного текста


@dataclass
class SearchResult:
    """Страница результатов поиска с общей статистикой"""

    matches: List[KeywordMatch]  # Только совпадения текущей страницы
    statistics: MatchStatistics
    page: int
    page_size: int
    total_pages: int
    documents: List[str] = field(default_factory=list)  # Обработанные документы
