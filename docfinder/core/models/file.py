from pydantic import BaseModel


class FileContent(BaseModel):
    """Загруженный файл, прочитанный в память"""

    filename: str
    content: bytes
    content_type: str = "application/pdf"

    @property
    def size(self) -> int:
        """Размер содержимого в байтах"""
        return len(self.content)

    @property
    def file_extension(self) -> str:
        """Получить расширение файла"""
        return self.filename.split(".")[-1].lower() if "." in self.filename else ""
