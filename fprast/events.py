"""An input event queue with click and key waiting helpers."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from enum import IntEnum

NO_EVENT = -3000


class EventKind(IntEnum):
    """Kinds of input event, valued by the signal each one yields."""

    EXPOSE = -1
    MOTION = -2
    BUTTON = -3
    CONFIGURE = -4
    OTHER = -1000
    KEY = 0


@dataclass(frozen=True)
class Event:
    """One input event in window coordinates (row 0 at the top).

    ``code`` is the key code of a KEY event; ``pressed`` tells whether a
    mouse button was held during a MOTION event. For CONFIGURE, x and y
    carry the window width and height.
    """

    kind: EventKind
    x: int = 0
    y: int = 0
    code: int = 0
    pressed: bool = False


class EventQueue:
    """Queued input for a window ``height`` pixels tall.

    Polling reports positions in canvas coordinates, with y growing upward.
    """

    def __init__(self, height):
        self.height = int(height)
        self._events = deque()
        self._mouse = (0, 0)

    def post(self, event):
        """Append a raw event."""
        self._events.append(event)

    def click(self, x, y):
        """Queue a button press at canvas position (x, y)."""
        self.post(Event(EventKind.BUTTON, int(x), self.height - 1 - int(y)))

    def key(self, code):
        """Queue a key press; a one-character string stands for its code."""
        if isinstance(code, str):
            code = ord(code)
        self.post(Event(EventKind.KEY, code=int(code)))

    def poll(self):
        """Take the next event and return (signal, (x, y)).

        The signal is a key code (>= 0) for a key press, or a negative
        number: -1 expose, -2 drag, -3 click, -4 configure, -1000 other,
        and -3000 when the queue is empty. Motion without a held button
        is skipped.
        """
        while self._events:
            event = self._events.popleft()
            if event.kind is EventKind.EXPOSE:
                return int(EventKind.EXPOSE), (0, 0)
            if event.kind is EventKind.MOTION:
                if not event.pressed:
                    continue
                return int(EventKind.MOTION), (event.x, self.height - 1 - event.y)
            if event.kind is EventKind.BUTTON:
                return int(EventKind.BUTTON), (event.x, self.height - 1 - event.y)
            if event.kind is EventKind.CONFIGURE:
                return int(EventKind.CONFIGURE), (event.x, event.y)
            if event.kind is EventKind.KEY:
                return event.code, (0, 0)
            return int(EventKind.OTHER), (0, 0)
        return NO_EVENT, (0, 0)

    def _next(self):
        if not self._events:
            raise EOFError("no more input events")
        return self.poll()

    def wait_click(self):
        """Skip events until a click and return its (x, y).

        Raises EOFError when the queue runs out first.
        """
        while True:
            signal, position = self._next()
            if signal == EventKind.BUTTON:
                return position

    def wait_key(self):
        """Skip events until a key press and return its code.

        Raises EOFError when the queue runs out first.
        """
        while True:
            signal, _ = self._next()
            if signal >= 0:
                return signal

    def no_wait_key(self):
        """Return the next signal without waiting; negative if no key was hit."""
        signal, _ = self.poll()
        return signal

    def wait_mouse(self):
        """Wait for a click and remember its position."""
        self._mouse = self.wait_click()

    def mouse(self):
        """Return the position remembered by the last ``wait_mouse``."""
        return self._mouse


def current_hms():
    """Return the local time as (hour, minute, second)."""
    now = time.localtime()
    return (now.tm_hour, now.tm_min, now.tm_sec)