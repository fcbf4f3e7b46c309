# app/client/poller.py
import logging
import threading
from typing import Any, Callable, Optional

from app.client.notifications import ToastService

logger = logging.getLogger(__name__)


class AnalyticsPoller:
    """Re-fetch analytics on a fixed interval until stopped."""

    def __init__(
        self,
        fetch: Callable[[], Any],
        on_data: Callable[[Any], None],
        interval: float = 30.0,
        toasts: Optional[ToastService] = None,
    ):
        self._fetch = fetch
        self._on_data = on_data
        self._interval = interval
        self._toasts = toasts
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def poll_once(self) -> None:
        try:
            data = self._fetch()
        except Exception as e:
            logger.warning("Analytics refresh failed: %s", e)
            if self._toasts is not None:
                self._toasts.error(f"Failed to load analytics: {e}")
            return
        self._on_data(data)

    def _run(self) -> None:
        while not self._stop.is_set():
            self.poll_once()
            self._stop.wait(self._interval)

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="analytics-poller", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
