class SearchError(Exception):
    """Ошибка при поиске по документам"""


class EmptyKeywordError(SearchError):
    """Пустое ключевое слово"""

    def __init__(self):
        super().__init__("Ключевое слово не может быть пустым")


class RateLimitExceededError(Exception):
    """Превышен лимит запросов"""

    def __init__(self, identifier: str, max_requests: int, window_seconds: float):
        self.identifier = identifier
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        super().__init__(
            f"Превышен лимит запросов: не более {max_requests} за {window_seconds:g} с"
        )
