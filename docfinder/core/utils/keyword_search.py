"""
Поиск точных вхождений ключевого слова в извлеченном тексте документов
"""

import re
import unicodedata
from collections import Counter
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from docfinder.core.exceptions.search import EmptyKeywordError
from docfinder.core.models.document import TextDocument, TextPage
from docfinder.core.models.search import KeywordMatch, MatchStatistics, SearchOptions


class KeywordSearchEngine:
    """
    Поиск ключевого слова по строкам страниц документов.

    Класс не хранит состояния между вызовами: результат зависит
    только от ключевого слова, документов и параметров поиска.
    """

    def search(
        self,
        keyword: str,
        documents: Sequence[TextDocument],
        options: Optional[SearchOptions] = None,
    ) -> List[KeywordMatch]:
        """
        Поиск всех вхождений ключевого слова во всех документах

        Args:
            keyword: str - ключевое слово (ищется буквально, спецсимволы regex не работают)
            documents: Sequence[TextDocument] - документы для поиска
            options: Optional[SearchOptions] - параметры поиска

        Returns:
            List[KeywordMatch]: Совпадения, отсортированные по документу,
            странице, строке и позиции в строке

        Raises:
            EmptyKeywordError: Если ключевое слово пустое или состоит из пробелов
        """
        if not keyword or not keyword.strip():
            raise EmptyKeywordError()

        options = options or SearchOptions()
        pattern = self._compile_pattern(keyword, options.case_sensitive)

        matches = []
        for document in documents:
            for page in document.pages:
                matches.extend(
                    self._search_page(
                        keyword, pattern, document.document_name, page, options
                    )
                )

        # sorted() стабилен: при равных ключах сохраняется порядок документов на входе
        return sorted(matches, key=lambda match: match.sort_key)

    def get_statistics(self, matches: Iterable[KeywordMatch]) -> MatchStatistics:
        """
        Статистика по уже найденным совпадениям (документы повторно не сканируются)

        Args:
            matches: Iterable[KeywordMatch] - совпадения

        Returns:
            MatchStatistics: Количество совпадений, документов и страниц с совпадениями
        """
        by_document = Counter()
        by_page = Counter()

        for match in matches:
            by_document[match.document_name] += 1
            by_page[(match.document_name, match.page_number)] += 1

        return MatchStatistics(
            total_matches=sum(by_document.values()),
            documents_with_matches=len(by_document),
            pages_with_matches=len(by_page),
            matches_by_document=dict(by_document),
            matches_by_page=dict(by_page),
        )

    def find_occurrences(
        self, pattern: re.Pattern, line: str, whole_word: bool = False
    ) -> Iterator[Tuple[int, int]]:
        """
        Позиции вхождений в строке слева направо.

        Следующий поиск начинается с символа после начала предыдущего
        вхождения, поэтому перекрывающиеся вхождения тоже находятся:
        "aa" в "aaa" дает (0, 2) и (1, 3).
        """
        position = 0
        while position < len(line):
            found = pattern.search(line, position)
            if found is None:
                return

            start, end = found.span()
            if not whole_word or self.is_whole_word(line, start, end):
                yield start, end

            position = start + 1

    def is_whole_word(self, line: str, start: int, end: int) -> bool:
        """Проверяет, что вхождение не окружено буквами, цифрами или '_'"""
        if start > 0 and _is_word_char(line[start - 1]):
            return False
        if end < len(line) and _is_word_char(line[end]):
            return False
        return True

    def _compile_pattern(self, keyword: str, case_sensitive: bool) -> re.Pattern:
        flags = 0 if case_sensitive else re.IGNORECASE
        return re.compile(re.escape(keyword), flags)

    def _search_page(
        self,
        keyword: str,
        pattern: re.Pattern,
        document_name: str,
        page: TextPage,
        options: SearchOptions,
    ) -> List[KeywordMatch]:
        matches = []

        for line_index, line in enumerate(page.lines):
            for start, end in self.find_occurrences(pattern, line, options.whole_word):
                matches.append(
                    KeywordMatch(
                        keyword=keyword,
                        document_name=document_name,
                        page_number=page.page_number,
                        line_number=line_index + 1,
                        column_start=start,
                        column_end=end,
                        matched_text=line[start:end],
                        context_before=line[
                            max(0, start - options.max_context_length) : start
                        ],
                        context_after=line[end : end + options.max_context_length],
                        full_line=line,
                    )
                )

        return matches


def _is_word_char(char: str) -> bool:
    # Комбинирующие знаки (ударение, диакритика) продолжают слово
    return char.isalnum() or char == "_" or unicodedata.category(char).startswith("M")


# Создаем глобальный экземпляр для переиспользования
keyword_search_engine = KeywordSearchEngine()
