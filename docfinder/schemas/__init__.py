from .search import (
    MatchContext,
    MatchSchema,
    PageMatchCount,
    ProcessingStatus,
    SearchMeta,
    SearchResponse,
    StatisticsSchema,
)

__all__ = [
    "MatchContext",
    "MatchSchema",
    "PageMatchCount",
    "ProcessingStatus",
    "SearchMeta",
    "SearchResponse",
    "StatisticsSchema",
]
