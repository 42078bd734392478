import time
from dataclasses import dataclass
from typing import Callable, Dict


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """
    Ограничение числа запросов в фиксированном окне времени.

    Экземпляр создается вызывающей стороной и передается туда, где нужен;
    состояние хранится только внутри экземпляра. Истекшие окна удаляются
    не реже одного раза за период окна.
    """

    def __init__(
        self,
        max_requests: int = 10,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._next_sweep_at = clock() + window_seconds

    @property
    def tracked_identifiers(self) -> int:
        """Количество клиентов, для которых хранится окно"""
        return len(self._windows)

    def check(self, identifier: str) -> bool:
        """
        Учитывает запрос и проверяет, укладывается ли он в лимит

        Args:
            identifier: str - идентификатор клиента

        Returns:
            bool: True, если запрос разрешен
        """
        now = self._clock()
        if now >= self._next_sweep_at:
            self._sweep(now)

        window = self._windows.get(identifier)

        if window is None or now >= window.reset_at:
            self._windows[identifier] = _Window(count=1, reset_at=now + self.window_seconds)
            return True

        if window.count >= self.max_requests:
            return False

        window.count += 1
        return True

    def _sweep(self, now: float) -> None:
        """Удаляет окна, срок которых истек"""
        expired = [key for key, window in self._windows.items() if now >= window.reset_at]
        for key in expired:
            del self._windows[key]
        self._next_sweep_at = now + self.window_seconds

    def reset(self) -> None:
        """Сбрасывает все окна"""
        self._windows.clear()
