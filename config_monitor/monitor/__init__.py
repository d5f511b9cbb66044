"""Config monitor: repository webhooks -> service refresh broadcasts."""

from config_monitor.monitor.models import PathNotification, RefreshEvent
from config_monitor.monitor.processor import process_notification
from config_monitor.monitor.resolver import parse_application_name, resolve_service_names

__all__ = [
    "PathNotification",
    "RefreshEvent",
    "parse_application_name",
    "process_notification",
    "resolve_service_names",
]
