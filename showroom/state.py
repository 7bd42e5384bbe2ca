from __future__ import annotations
"""Page-level fetch state machine.

    IDLE -> LOADING -> READY | FAILED

``begin()`` hands out a generation token. Only the holder of the newest
token may move the loader to READY / FAILED; a response for a superseded
request is dropped, so a slow old fetch can never overwrite newer state.
"""
import enum
import threading
from datetime import datetime, timezone
from typing import Callable, Generic, Optional, TypeVar

from .errors import ShowroomError
from .logger import Logger


log = Logger.bind(__name__)

T = TypeVar('T')


def _utc_now():
    return datetime.now(timezone.utc)


class PageState(enum.Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    FAILED = 'failed'


class PageLoader(Generic[T]):

    def __init__(self, name: str = 'page'):
        self.name = name
        self.state = PageState.IDLE
        self.value: Optional[T] = None
        self.error: Optional[ShowroomError] = None
        self.message: Optional[str] = None
        self.last_started: Optional[datetime] = None
        self.last_finished: Optional[datetime] = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            self.state = PageState.LOADING
            self.last_started = _utc_now()
            return self._generation

    def _is_current(self, token: int) -> bool:
        if token != self._generation:
            log.debug(f"{self.name} stale result dropped token={token} current={self._generation}")
            return False
        return True

    def resolve(self, token: int, value: T) -> bool:
        with self._lock:
            if not self._is_current(token):
                return False
            self.state = PageState.READY
            self.value = value
            self.error = None
            self.message = None
            self.last_finished = _utc_now()
            return True

    def fail(self, token: int, error: ShowroomError, message: Optional[str] = None) -> bool:
        with self._lock:
            if not self._is_current(token):
                return False
            self.state = PageState.FAILED
            self.value = None
            self.error = error
            self.message = message or str(error)
            self.last_finished = _utc_now()
            return True

    def run(self, fn: Callable[[], T], describe: Optional[Callable[[ShowroomError], str]] = None) -> "PageLoader[T]":
        """Begin, call ``fn`` and settle with its result.

        ShowroomError moves the loader to FAILED; ``describe`` turns the error
        into the user-facing message. Other exceptions propagate.
        """
        token = self.begin()
        try:
            value = fn()
        except ShowroomError as e:
            log.warn(f"{self.name} failed kind={type(e).__name__} error={e}")
            self.fail(token, e, describe(e) if describe else None)
        else:
            self.resolve(token, value)
        return self

    @property
    def ready(self) -> bool:
        return self.state is PageState.READY

    @property
    def failed(self) -> bool:
        return self.state is PageState.FAILED

    def __repr__(self) -> str:
        return f"PageLoader(name={self.name!r}, state={self.state.value}, generation={self._generation})"


__all__ = ['PageState', 'PageLoader']
