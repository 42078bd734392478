import io

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from docfinder.api.dependencies import get_rate_limiter
from docfinder.core.models.document import TextDocument, TextPage
from docfinder.core.utils.rate_limiter import RateLimiter
from docfinder.main import app


def build_pdf(pages):
    """Собирает настоящий PDF: каждая страница - список строк"""
    from reportlab.lib.pagesizes import letter
    from reportlab.pdfgen import canvas

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=letter)

    for lines in pages:
        y = 750
        for line in lines:
            pdf.drawString(72, y, line)
            y -= 20
        pdf.showPage()

    pdf.save()
    buffer.seek(0)
    return buffer.getvalue()


@pytest.fixture
def make_pdf():
    """Фабрика PDF документов для тестов"""
    return build_pdf


@pytest.fixture
def sample_file_pdf():
    """PDF из двух страниц с известным текстом"""
    return {
        "filename": "report.pdf",
        "content": build_pdf(
            [
                ["Quarterly report for the sales team", "Sales grew by 25 percent"],
                ["Another page with more sales content"],
            ]
        ),
        "content_type": "application/pdf",
    }


@pytest.fixture
def second_file_pdf():
    """Второй PDF для проверки сортировки и фильтра по документу"""
    return {
        "filename": "appendix.pdf",
        "content": build_pdf([["Appendix: sales figures by region"]]),
        "content_type": "application/pdf",
    }


@pytest.fixture
def sample_corpus():
    """Корпус из двух документов, уже разбитый на страницы и строки"""
    return [
        TextDocument(
            document_name="b.pdf",
            pages=[
                TextPage(page_number=2, lines=["test on b page two"]),
                TextPage(page_number=1, lines=["first line", "a test and another test"]),
            ],
        ),
        TextDocument(
            document_name="a.pdf",
            pages=[
                TextPage(page_number=3, lines=["Test", "", "nothing here"]),
                TextPage(page_number=1, lines=["This is a test document."]),
            ],
        ),
    ]


@pytest.fixture
def rate_limiter():
    """Отдельный ограничитель на каждый тест, чтобы тесты не влияли друг на друга"""
    return RateLimiter(max_requests=1000, window_seconds=60)


@pytest_asyncio.fixture
async def test_client(rate_limiter):
    """Тестовый HTTP клиент с переопределенными зависимостями"""
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
