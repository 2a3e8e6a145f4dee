"""Tenacity stop condition for cancellable waits."""

import threading

from tenacity import RetryCallState
from tenacity.stop import stop_base


class stop_if_cancelled(stop_base):
    """Stop if the given cancellation event is set."""

    def __init__(self, event: threading.Event) -> None:
        self.event = event

    def __call__(self, retry_state: "RetryCallState") -> bool:
        return self.event.is_set()
