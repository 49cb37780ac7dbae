"""
Event sources feeding the screen loops.

Input and timer ticks arrive through one ordered stream. With pygame the
timer is a custom event posted into the same queue as the keyboard, so the
loops only ever block on one call.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Union

import pygame

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


@dataclass(frozen=True)
class KeyDown:
    key: int


@dataclass(frozen=True)
class KeyUp:
    key: int


@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Event = Union[KeyDown, KeyUp, Tick, Quit]


class PygameEventSource:
    """Blocks on the pygame queue, translating the events the game cares about"""

    def __init__(self):
        self.interval_ms = 0

    def start_timer(self, interval_ms: int):
        """(Re)arm the periodic tick; a new interval replaces the old one"""
        if interval_ms != self.interval_ms:
            logger.debug("Tick timer set to %d ms", interval_ms)
        self.interval_ms = interval_ms
        pygame.time.set_timer(TICK_EVENT, interval_ms)

    def stop_timer(self):
        if self.interval_ms:
            logger.debug("Tick timer stopped")
        self.interval_ms = 0
        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.event.clear(TICK_EVENT)

    def next_event(self) -> Event:
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return Quit()
            if event.type == TICK_EVENT:
                return Tick()
            if event.type == pygame.KEYDOWN:
                return KeyDown(event.key)
            if event.type == pygame.KEYUP:
                return KeyUp(event.key)


class ScriptedEventSource:
    """
    Replays a fixed sequence of events, then reports Quit forever.

    Used to drive the game without a keyboard (headless runs, tests). Timer
    calls are recorded rather than scheduled; ticks are part of the script.
    """

    def __init__(self, events: Iterable[Event]):
        self.pending: List[Event] = list(events)
        self.interval_ms = 0
        self.timer_history: List[int] = []

    def start_timer(self, interval_ms: int):
        self.interval_ms = interval_ms
        self.timer_history.append(interval_ms)

    def stop_timer(self):
        self.interval_ms = 0
        self.timer_history.append(0)

    def next_event(self) -> Event:
        if not self.pending:
            return Quit()
        return self.pending.pop(0)
