"""
Telemetry — analytics events emitted after a successful web build.

Transport is out of scope: anything with a ``send(event)`` method is an
Analytics sink.  ``RecordingAnalytics`` keeps events in memory.
"""
from collections import Counter
from typing import List, Protocol, Union

from pydantic import BaseModel


class BuildInfoEvent(BaseModel):
    """Describes a finished build."""
    kind: str = "build_info"
    label: str
    build_type: str
    settings: str


class TimingEvent(BaseModel):
    """Duration of a build workflow step."""
    kind: str = "timing"
    workflow: str
    variable_name: str
    elapsed_ms: int = 0


AnalyticsEvent = Union[BuildInfoEvent, TimingEvent]


class Analytics(Protocol):
    def send(self, event: AnalyticsEvent) -> None:
        ...


class RecordingAnalytics:
    """In-memory sink; ``usage`` counts events per kind."""

    def __init__(self):
        self.sent_events: List[AnalyticsEvent] = []
        self.usage: Counter = Counter()

    def send(self, event: AnalyticsEvent) -> None:
        self.sent_events.append(event)
        self.usage[event.kind] += 1

    def timing_event_exists(self, workflow: str, variable_name: str) -> bool:
        return any(
            isinstance(e, TimingEvent)
            and e.workflow == workflow
            and e.variable_name == variable_name
            for e in self.sent_events
        )
