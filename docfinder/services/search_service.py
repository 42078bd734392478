import math
from typing import List, Optional, Sequence

from docfinder.core.config import settings
from docfinder.core.exceptions.file import FileValidationError, TextExtractionError
from docfinder.core.exceptions.search import EmptyKeywordError
from docfinder.core.interfaces.file_service import IFileService
from docfinder.core.logger import logger
from docfinder.core.models.document import TextDocument
from docfinder.core.models.file import FileContent
from docfinder.core.models.search import KeywordMatch, SearchOptions, SearchResult
from docfinder.core.utils.keyword_search import (
    KeywordSearchEngine,
    keyword_search_engine,
)


class SearchService:
    """Сервис поиска ключевого слова по загруженным документам"""

    def __init__(
        self,
        file_service: IFileService,
        engine: KeywordSearchEngine = keyword_search_engine,
    ):
        self.file_service = file_service
        self.engine = engine

    async def load_documents(self, files: List[FileContent]) -> List[TextDocument]:
        """
        Валидация файлов и извлечение текста

        Args:
            files: List[FileContent] - загруженные файлы

        Returns:
            List[TextDocument]: Документы в порядке загрузки, без повторов

        Raises:
            FileValidationError: Если файл или набор файлов не прошел валидацию
            TextExtractionError: Если не удалось извлечь текст из файла
        """
        await self.file_service.validate_batch([file.filename for file in files])

        documents = []
        seen_files = set()
        for file in files:
            try:
                # Повтором считается только файл с тем же именем и тем же содержимым
                file_key = (
                    file.filename,
                    await self.file_service.calculate_hash(file.content),
                )
                if file_key in seen_files:
                    logger.warning(
                        f"Файл {file.filename} повторяет уже загруженный, пропускаем"
                    )
                    continue
                seen_files.add(file_key)

                documents.append(
                    await self.file_service.extract_document(file.filename, file.content)
                )
            except FileValidationError as e:
                logger.info(f"Ошибка валидации файла {file.filename}: {e}")
                raise
            except TextExtractionError as e:
                logger.error(f"Ошибка извлечения текста из {file.filename}: {e}")
                raise

        return documents

    async def search_files(
        self,
        files: List[FileContent],
        keyword: str,
        options: Optional[SearchOptions] = None,
        document_name: Optional[str] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> SearchResult:
        """
        Поиск ключевого слова в загруженных файлах

        Args:
            files: List[FileContent] - загруженные PDF файлы
            keyword: str - ключевое слово
            options: Optional[SearchOptions] - параметры поиска
            document_name: Optional[str] - оставить совпадения только этого документа
            page: int - номер страницы результатов, с 1
            page_size: Optional[int] - размер страницы результатов

        Returns:
            SearchResult: Страница результатов и статистика

        Raises:
            EmptyKeywordError: Если ключевое слово пустое
            FileValidationError: Если файлы не прошли валидацию
            TextExtractionError: Если не удалось извлечь текст
        """
        # Пустой запрос отклоняем до разбора файлов
        if not keyword or not keyword.strip():
            raise EmptyKeywordError()

        documents = await self.load_documents(files)
        return self.search_documents(
            keyword, documents, options, document_name, page, page_size
        )

    def search_documents(
        self,
        keyword: str,
        documents: Sequence[TextDocument],
        options: Optional[SearchOptions] = None,
        document_name: Optional[str] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> SearchResult:
        """
        Поиск по уже извлеченным документам с фильтром и пагинацией

        Статистика считается по совпадениям после фильтра по документу,
        но до разбиения на страницы.
        """
        page_size = page_size or settings.DEFAULT_PAGE_SIZE
        logger.info(
            f"Поиск по запросу: '{keyword}', документов: {len(documents)}, options: {options}"
        )

        matches = self.engine.search(keyword, documents, options)
        matches = self.filter_by_document(matches, document_name)
        statistics = self.engine.get_statistics(matches)

        logger.info(
            f"Найдено совпадений: {statistics.total_matches} "
            f"в {statistics.documents_with_matches} документах"
        )

        return SearchResult(
            matches=self.paginate(matches, page, page_size),
            statistics=statistics,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(len(matches) / page_size),
            documents=[document.document_name for document in documents],
        )

    @staticmethod
    def filter_by_document(
        matches: List[KeywordMatch], document_name: Optional[str]
    ) -> List[KeywordMatch]:
        """Оставляет совпадения одного документа, порядок сохраняется"""
        if document_name is None:
            return matches
        return [match for match in matches if match.document_name == document_name]

    @staticmethod
    def paginate(
        matches: List[KeywordMatch], page: int, page_size: int
    ) -> List[KeywordMatch]:
        """Срез совпадений для страницы page (нумерация с 1)"""
        if page < 1 or page_size < 1:
            raise ValueError("page и page_size должны быть положительными")
        start = (page - 1) * page_size
        return matches[start : start + page_size]
