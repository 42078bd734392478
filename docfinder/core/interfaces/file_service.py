from abc import ABC, abstractmethod
from typing import List

from docfinder.core.models.document import TextDocument


class IFileService(ABC):
    @abstractmethod
    async def validate_file(self, filename: str, content: bytes) -> None:
        """
        Валидация файла. Проверяется тип, сигнатура и размер файла.

        Args:
            filename: str - имя файла
            content: bytes - содержимое файла

        Raises:
            InvalidFileNameError: Если имя файла недопустимо
            UnsupportedFileTypeError: Если тип файла не поддерживается
            EmptyFileError: Если файл пуст
            FileTooLargeError: Если файл слишком большой
        """
        raise NotImplementedError

    @abstractmethod
    async def validate_batch(self, filenames: List[str]) -> None:
        """
        Проверка количества файлов в одном запросе

        Args:
            filenames: List[str] - имена файлов

        Raises:
            TooManyFilesError: Если файлов больше допустимого
        """
        raise NotImplementedError

    @abstractmethod
    async def calculate_hash(self, content: bytes) -> str:
        """
        Вычисление SHA-256 хеша содержимого.

        Args:
            content: bytes - содержимое для хеширования

        Returns:
            str: SHA-256 хеш в hex формате
        """
        raise NotImplementedError

    @abstractmethod
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
        raise NotImplementedError
