"""Notification extractors: webhook headers + body -> PathNotification."""

from collections.abc import Mapping
from typing import Any, Protocol

from config_monitor.monitor.models import PathNotification
from config_monitor.utils.logger import get_logger

logger = get_logger("config_monitor.monitor.extractor")


class NotificationExtractionError(ValueError):
    """Webhook body or headers cannot be decoded into a notification."""


class NotificationExtractor(Protocol):
    """Decodes one webhook request into changed paths."""

    def extract(self, headers: Mapping[str, str], body: Any) -> PathNotification | None:
        """Return the notification, or None when the request carries no paths.

        Raises NotificationExtractionError for a malformed request.
        """
        ...


class PathListExtractor:
    """Provider-neutral extractor for bodies of the form ``{"path": "..."}`` or ``{"path": [...]}``."""

    key = "path"

    def extract(self, headers: Mapping[str, str], body: Any) -> PathNotification | None:
        if not isinstance(body, dict):
            raise NotificationExtractionError(
                f"Expected a JSON object body, got {type(body).__name__}"
            )
        raw = body.get(self.key)
        if raw is None:
            logger.debug("extractor.no_path_key", keys=sorted(body))
            return None
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list):
            raise NotificationExtractionError(
                f"{self.key!r} must be a string or a list of strings, got {type(raw).__name__}"
            )
        paths: list[str] = []
        for item in raw:
            if not isinstance(item, str):
                raise NotificationExtractionError(
                    f"{self.key!r} entries must be strings, got {type(item).__name__}"
                )
            if item.strip():
                paths.append(item)
        if not paths:
            return None
        return PathNotification(paths=paths)
