"""
Подготовка найденных совпадений к отображению
"""

from html import escape

from docfinder.core.models.search import ContextInfo, HighlightSegments, KeywordMatch


def split_highlight(match: KeywordMatch) -> HighlightSegments:
    """Разбивает окно совпадения на контекст до, выделение и контекст после"""
    return HighlightSegments(
        before=match.context_before,
        matched=match.matched_text,
        after=match.context_after,
    )


def render_highlight(match: KeywordMatch) -> str:
    """
    HTML-разметка окна совпадения с выделением найденного текста.

    Каждая часть экранируется отдельно до оборачивания в теги, поэтому
    текст документа не может внедрить собственную разметку.

    Args:
        match: KeywordMatch - совпадение

    Returns:
        str: Разметка вида <span>до</span><mark>слово</mark><span>после</span>
    """
    segments = split_highlight(match)
    return (
        f'<span class="context-before">{escape(segments.before)}</span>'
        f'<mark class="keyword-highlight">{escape(segments.matched)}</mark>'
        f'<span class="context-after">{escape(segments.after)}</span>'
    )


def context_info(match: KeywordMatch) -> ContextInfo:
    """Контекстное окно совпадения с позицией выделения внутри него"""
    segments = split_highlight(match)
    context_text = f"{segments.before}{segments.matched}{segments.after}"
    return ContextInfo(
        text=context_text,
        length=len(context_text),
        highlight_start=len(segments.before),
        highlight_length=len(segments.matched),
    )
