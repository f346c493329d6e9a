from typing import List

import numpy as np

from CallEvent import CallEvent
from Network import LinkState
from PathEngine import PathResult


class ReservationLedger:
    """
    Tracks which units each admitted call holds so that they can be handed
    back exactly when the call ends.
    """

    def __init__(self, events: List[CallEvent], link_state: LinkState):
        self.events = events
        self.link_state = link_state

    def commit(self, index: int, path: PathResult):
        """Reserve one unit on every edge of path for events[index]."""
        event = self.events[index]
        for u, v in path.edges:
            self.link_state.reserve(u, v)
            event.reserve(u, v)
        event.is_active = True

    def release(self, event: CallEvent):
        self.link_state.release(event.reservation)
        event.reset()

    def reclaim(self, index: int) -> int:
        """
        End every earlier call whose end time has passed by the arrival of
        events[index]. Relies on the event list being sorted by arrival time.

        Returns:
            number of calls reclaimed
        """
        now = self.events[index].arrival_time
        reclaimed = 0
        for event in self.events[:index]:
            if event.has_expired(now):
                self.release(event)
                reclaimed += 1
        return reclaimed

    def active_calls(self) -> List[CallEvent]:
        return [event for event in self.events if event.is_active]

    def reserved(self) -> np.ndarray:
        """Units held per edge, summed over all active calls."""
        total = np.zeros_like(self.link_state.available)
        for event in self.active_calls():
            total += event.reservation
        return total

    def reset(self):
        for event in self.events:
            event.reset()
