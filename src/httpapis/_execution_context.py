from typing import Callable, Optional

from .models.exceptions import ContextInactiveError


class ExecutionContext:
    """Tracks whether the owner of a client is still alive.

    Requests check the context before they start and again once the exchange
    completes, so nothing is resolved into an owner that has been torn down and
    a retry loop stops as soon as the owner goes away.

    Args:
        is_alive: Optional predicate consulted in addition to the context's own
            flag, e.g. ``lambda: not shutdown_event.is_set()``.
    """

    def __init__(self, is_alive: Optional[Callable[[], bool]] = None) -> None:
        self._active = True
        self._is_alive = is_alive

    @property
    def is_active(self) -> bool:
        if not self._active:
            return False
        return self._is_alive() if self._is_alive is not None else True

    def deactivate(self) -> None:
        self._active = False

    def ensure_active(self) -> None:
        if not self.is_active:
            raise ContextInactiveError()
