# app/client/notifications.py
import itertools
import threading
import time
from dataclasses import dataclass
from typing import Callable, List

TOAST_TYPES = ("success", "error", "info", "warning")
DEFAULT_DURATION = 4.0


@dataclass
class Toast:
    id: int
    message: str
    type: str
    expires_at: float


class ToastService:
    """In-process notification queue; toasts expire after their duration."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._ids = itertools.count(1)
        self._toasts: List[Toast] = []
        self._lock = threading.Lock()

    @property
    def toasts(self) -> List[Toast]:
        now = self._clock()
        with self._lock:
            self._toasts = [t for t in self._toasts if t.expires_at > now]
            return list(self._toasts)

    def show(self, message: str, type: str = "info", duration: float = DEFAULT_DURATION) -> int:
        if type not in TOAST_TYPES:
            raise ValueError(f"Unknown toast type: {type}")
        toast = Toast(id=next(self._ids), message=message, type=type, expires_at=self._clock() + duration)
        with self._lock:
            self._toasts.append(toast)
        return toast.id

    def success(self, message: str) -> int:
        return self.show(message, "success")

    def error(self, message: str) -> int:
        return self.show(message, "error")

    def info(self, message: str) -> int:
        return self.show(message, "info")

    def warning(self, message: str) -> int:
        return self.show(message, "warning")

    def dismiss(self, toast_id: int) -> None:
        with self._lock:
            self._toasts = [t for t in self._toasts if t.id != toast_id]
