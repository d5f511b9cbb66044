"""Turn a path notification into refresh broadcasts, one per affected service identifier."""

from collections.abc import Callable

from config_monitor.monitor.models import PathNotification
from config_monitor.monitor.resolver import parse_application_name, resolve_service_names
from config_monitor.utils.logger import get_logger

logger = get_logger("config_monitor.monitor.processor")


def collect_services(paths: list[str]) -> list[str]:
    """Union of identifiers for all paths, in path order, each identifier once."""
    seen: set[str] = set()
    services: list[str] = []
    for path in paths:
        candidates = resolve_service_names(path)
        # Repository file names may differ from the client application name
        app_name = parse_application_name(path)
        if app_name is not None:
            candidates = [app_name, *candidates]
        for service in candidates:
            if service not in seen:
                seen.add(service)
                services.append(service)
    return services


def process_notification(
    notification: PathNotification | None,
    publish: Callable[[str], None],
) -> list[str]:
    """Resolve the notification's paths and call publish once per identifier.

    A failing publish is logged and does not stop the remaining identifiers.
    Returns every resolved identifier, including ones whose publish failed.
    """
    if notification is None:
        logger.debug("monitor.no_notification")
        return []

    services = collect_services(notification.paths)
    if not services:
        logger.info("monitor.no_services", paths=notification.paths)
        return []

    for service in services:
        logger.info("monitor.refresh", service=service)
        try:
            publish(service)
        except Exception as e:
            logger.exception("monitor.publish_error", service=service, error=str(e))
    return services
