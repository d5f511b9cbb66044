"""Refresh broadcast sinks and the publish callback handed to the processor."""

from collections.abc import Callable
from typing import Protocol

from config_monitor.monitor.models import RefreshEvent
from config_monitor.utils.logger import get_logger

logger = get_logger("config_monitor.monitor.broadcast")


class BroadcastSink(Protocol):
    """Delivers refresh events to the other processes (bus, queue, HTTP fan-out...)."""

    def publish(self, event: RefreshEvent) -> None:
        """Send one refresh event. May raise; the processor logs and moves on."""
        ...


class LoggingBroadcastSink:
    """Sink that records each refresh event in the structured log only."""

    def publish(self, event: RefreshEvent) -> None:
        logger.info(
            "broadcast.refresh",
            event_id=event.id,
            origin=event.origin_service,
            destination=event.destination_service,
        )


def make_publisher(sink: BroadcastSink, bus_id: str) -> Callable[[str], None]:
    """Bind sink and bus id into a publish(service) callback."""

    def publish(service: str) -> None:
        sink.publish(RefreshEvent(origin_service=bus_id, destination_service=service))

    return publish
