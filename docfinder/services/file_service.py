import asyncio
import hashlib
import io
import re
from typing import List

import pdfplumber

from docfinder.core.config import settings
from docfinder.core.exceptions.file import (
    EmptyFileError,
    FileTooLargeError,
    InvalidFileNameError,
    TextExtractionError,
    TooManyFilesError,
    UnsupportedFileTypeError,
)
from docfinder.core.interfaces.file_service import IFileService
from docfinder.core.logger import logger
from docfinder.core.models.document import TextDocument, TextPage

PDF_MAGIC_NUMBER = b"%PDF"
FORBIDDEN_FILENAME_CHARS = re.compile(r"[<>:\"|?*\x00-\x1F]")


class FileService(IFileService):
    """Сервис для валидации загруженных файлов и извлечения текста"""

    def __init__(self):
        self.max_file_size = settings.MAX_FILE_SIZE
        self.max_files = settings.MAX_FILES
        self.max_filename_length = settings.MAX_FILENAME_LENGTH
        self.allowed_types = settings.ALLOWED_FILE_TYPES

    async def validate_file(self, filename: str, content: bytes) -> None:
        """
        Валидация файла. Проверяется имя, тип, сигнатура и размер файла.

        Args:
            filename: str - имя файла
            content: bytes - содержимое файла

        Raises:
            InvalidFileNameError: Если имя файла слишком длинное или содержит запрещенные символы
            UnsupportedFileTypeError: Если тип файла не поддерживается
            EmptyFileError: Если файл пуст
            FileTooLargeError: Если файл слишком большой
        """
        # Проверка имени файла
        if len(filename) > self.max_filename_length:
            logger.error(f"Слишком длинное имя файла: {len(filename)} символов")
            raise InvalidFileNameError(
                filename, f"длина больше {self.max_filename_length} символов"
            )
        if FORBIDDEN_FILENAME_CHARS.search(filename):
            logger.error(f"Имя файла содержит запрещенные символы: {filename!r}")
            raise InvalidFileNameError(filename, "содержит запрещенные символы")

        # Проверка типа файла
        file_extension = filename.split(".")[-1].lower() if "." in filename else ""
        if file_extension not in self.allowed_types:
            logger.error(f"Неподдерживаемый тип файла: {file_extension}")
            raise UnsupportedFileTypeError(self.allowed_types)

        # Проверка размера файла
        file_size = len(content)
        if file_size == 0:
            logger.error(f"Пустой файл: {filename}")
            raise EmptyFileError(filename)
        if file_size > self.max_file_size:
            logger.error(
                f"Файл слишком большой. Максимальный размер: {self.max_file_size / 1024 / 1024:.1f}MB"
            )
            raise FileTooLargeError(self.max_file_size)

        # Расширение можно подделать, поэтому проверяем и сигнатуру
        if not content.startswith(PDF_MAGIC_NUMBER):
            logger.error(f"Файл {filename} не является PDF по сигнатуре")
            raise UnsupportedFileTypeError(self.allowed_types)

    async def validate_batch(self, filenames: List[str]) -> None:
        """
        Проверка количества файлов в одном запросе

        Args:
            filenames: List[str] - имена файлов

        Raises:
            TooManyFilesError: Если файлов больше допустимого
        """
        if len(filenames) > self.max_files:
            logger.error(
                f"Слишком много файлов: {len(filenames)}, допустимо {self.max_files}"
            )
            raise TooManyFilesError(self.max_files, len(filenames))

    async def calculate_hash(self, content: bytes) -> str:
        """
        Вычисление SHA-256 хеша файла

        Args:
            content: bytes - содержимое файла для вычисления хеша

        Returns:
            str: SHA-256 хеш файла в hex формате
        """
        sha256_hash = hashlib.sha256()
        sha256_hash.update(content)
        return sha256_hash.hexdigest()

    def _extract_pages_from_pdf(self, filename: str, content: bytes) -> List[TextPage]:
        """
        Извлечение текста из PDF постранично

        Args:
            filename: str - имя файла (для сообщений об ошибках)
            content: bytes - содержимое PDF

        Returns:
            List[TextPage]: Страницы с непустыми строками, нумерация с 1

        Raises:
            TextExtractionError: Если не удалось извлечь текст из PDF
        """
        pages = []

        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                for page_number, page in enumerate(pdf.pages, start=1):
                    page_text = page.extract_text() or ""
                    lines = [line for line in page_text.splitlines() if line.strip()]
                    pages.append(
                        TextPage(page_number=page_number, lines=lines, text=page_text)
                    )
        except Exception as e:
            raise TextExtractionError(filename, str(e))

        return pages

    async def extract_document(self, filename: str, content: bytes) -> TextDocument:
        """
        Извлечение текста документа постранично и построчно

        Args:
            filename: str - имя файла, становится именем документа
            content: bytes - содержимое файла

        Returns:
            TextDocument: Документ со страницами и строками

        Raises:
            FileValidationError: Если файл не прошел валидацию
            TextExtractionError: Если не удалось извлечь текст из файла
        """
        await self.validate_file(filename, content)

        # Выполняем в отдельном потоке чтобы не блокировать event loop
        pages = await asyncio.get_running_loop().run_in_executor(
            None, self._extract_pages_from_pdf, filename, content
        )
        logger.info(f"Из файла {filename} извлечено страниц: {len(pages)}")

        return TextDocument(document_name=filename, pages=pages)
