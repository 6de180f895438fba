from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Callable


LOGGER = logging.getLogger(__name__)

Listener = Callable[..., None]


@dataclass(eq=False)
class ListenerHandle:
    """Detachable registration returned by `Observable.add_listener`."""

    owner: "Observable"
    event: str
    callback: Listener
    attached: bool = True

    def detach(self) -> None:
        if not self.attached:
            return
        self.owner._remove_listener(self)
        self.attached = False


@dataclass(eq=False)
class Observable:
    _listeners: list[ListenerHandle] = field(default_factory=list, init=False, repr=False, compare=False)

    def add_listener(self, event: str, callback: Listener) -> ListenerHandle:
        handle = ListenerHandle(owner=self, event=event, callback=callback)
        self._listeners.append(handle)
        return handle

    def listener_count(self, event: str | None = None) -> int:
        if event is None:
            return len(self._listeners)
        return sum(1 for h in self._listeners if h.event == event)

    def _remove_listener(self, handle: ListenerHandle) -> None:
        try:
            self._listeners.remove(handle)
        except ValueError:
            LOGGER.debug("listener for %r already removed", handle.event)

    def _fire(self, event: str, *args: Any) -> None:
        # Copy so callbacks may detach themselves while being notified.
        for handle in list(self._listeners):
            if handle.event == event and handle.attached:
                handle.callback(self, *args)
