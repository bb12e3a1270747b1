
"""Frame scheduler: one-shot callbacks run once per frame"""
import itertools
from typing import Callable, Dict


class FrameScheduler:
    """
    Stand-in for requestAnimationFrame. Callers ask for the next frame with
    request(); nothing repeats unless the callback asks again. Callbacks
    requested while run_pending() is running wait for the following frame.
    """
    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: Dict[int, Callable[[], None]] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request(self, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def run_pending(self) -> int:
        due = list(self._pending)
        ran = 0
        for handle in due:
            # an earlier callback this frame may have cancelled it
            cb = self._pending.pop(handle, None)
            if cb is None:
                continue
            cb()
            ran += 1
        return ran
