import pytest

from docfinder.core.models.document import TextDocument, TextPage
from docfinder.core.models.search import KeywordMatch
from docfinder.core.utils.keyword_search import keyword_search_engine


def make_match(document_name: str, page_number: int, line_number: int = 1) -> KeywordMatch:
    return KeywordMatch(
        keyword="term",
        document_name=document_name,
        page_number=page_number,
        line_number=line_number,
        column_start=0,
        column_end=4,
        matched_text="term",
        context_before="",
        context_after="",
        full_line="term",
    )


@pytest.mark.unit
class TestMatchStatistics:
    """Unit тесты статистики совпадений"""

    def test_empty_matches(self):
        """Тест статистики без совпадений"""
        statistics = keyword_search_engine.get_statistics([])

        assert statistics.total_matches == 0
        assert statistics.documents_with_matches == 0
        assert statistics.pages_with_matches == 0
        assert statistics.matches_by_document == {}
        assert statistics.matches_by_page == {}

    def test_counts_documents_and_pages(self):
        """Тест: 2 совпадения на странице 1 и 1 на странице 2 одного документа"""
        matches = [make_match("x", 1), make_match("x", 1, 2), make_match("x", 2)]

        statistics = keyword_search_engine.get_statistics(matches)

        assert statistics.total_matches == 3
        assert statistics.documents_with_matches == 1
        assert statistics.pages_with_matches == 2
        assert statistics.matches_by_document == {"x": 3}
        assert statistics.matches_by_page == {("x", 1): 2, ("x", 2): 1}

    def test_same_page_number_in_different_documents(self):
        """Тест: одинаковые номера страниц разных документов считаются отдельно"""
        matches = [make_match("a.pdf", 1), make_match("b.pdf", 1)]

        statistics = keyword_search_engine.get_statistics(matches)

        assert statistics.documents_with_matches == 2
        assert statistics.pages_with_matches == 2

    def test_order_does_not_matter(self):
        """Тест: результат не зависит от порядка совпадений"""
        matches = [make_match("b.pdf", 2), make_match("a.pdf", 1), make_match("b.pdf", 1)]

        assert keyword_search_engine.get_statistics(
            matches
        ) == keyword_search_engine.get_statistics(list(reversed(matches)))

    def test_statistics_of_search_results(self, sample_corpus):
        """Тест статистики по результатам реального поиска"""
        matches = keyword_search_engine.search("test", sample_corpus)

        statistics = keyword_search_engine.get_statistics(matches)

        assert statistics.total_matches == 5
        assert statistics.documents_with_matches == 2
        assert statistics.pages_with_matches == 4
        assert statistics.matches_by_document == {"a.pdf": 2, "b.pdf": 3}

    def test_no_match_search_gives_zero_statistics(self):
        """Тест статистики для поиска без результатов"""
        documents = [
            TextDocument(
                document_name="doc.pdf",
                pages=[TextPage(page_number=1, lines=["nothing to see"])],
            )
        ]

        matches = keyword_search_engine.search("absent", documents)

        assert keyword_search_engine.get_statistics(matches).total_matches == 0
