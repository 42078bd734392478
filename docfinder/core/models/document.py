from typing import List, Optional

from pydantic import BaseModel, Field


class TextPage(BaseModel):
    """Страница документа с извлеченными строками текста"""

    page_number: int = Field(..., ge=1)  # Нумерация с 1
    lines: List[str] = Field(default_factory=list)
    text: Optional[str] = None  # Полный текст страницы, поиском не используется

    class Config:
        frozen = True


class TextDocument(BaseModel):
    """Документ, подготовленный к поиску"""

    document_name: str
    pages: List[TextPage] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def page_count(self) -> int:
        """Количество страниц в документе"""
        return len(self.pages)
