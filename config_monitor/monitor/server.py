"""FastAPI endpoint for webhooks coming from repository providers."""

from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool

from config_monitor.config import BUS_ID, MONITOR_ENDPOINT_PATH
from config_monitor.monitor.broadcast import BroadcastSink, LoggingBroadcastSink, make_publisher
from config_monitor.monitor.extractor import (
    NotificationExtractionError,
    NotificationExtractor,
    PathListExtractor,
)
from config_monitor.monitor.processor import process_notification
from config_monitor.utils.logger import bind_context, clear_context, get_logger

logger = get_logger("config_monitor.monitor.server")

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def _read_body(request: Request) -> Any:
    """Decode a JSON body, or a form body into ``{"path": [...]}``."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_CONTENT_TYPE):
        form = await request.form()
        return {"path": [str(v) for v in form.getlist("path")]}
    try:
        return await request.json()
    except ValueError as e:
        logger.warning("monitor.body_parse_error", error=str(e))
        raise HTTPException(status_code=400, detail=f"Malformed JSON body: {e}") from e


def create_app(
    sink: BroadcastSink | None = None,
    extractor: NotificationExtractor | None = None,
    bus_id: str | None = None,
    endpoint_path: str | None = None,
) -> FastAPI:
    """
    Create FastAPI app exposing POST {endpoint_path}/monitor.
    Defaults come from config: the logging sink, the generic path-list extractor,
    BUS_ID and MONITOR_ENDPOINT_PATH.
    """
    app = FastAPI(title="Config Monitor", version="0.1.0")
    app.state.sink = sink if sink is not None else LoggingBroadcastSink()
    app.state.extractor = extractor if extractor is not None else PathListExtractor()
    app.state.bus_id = bus_id or BUS_ID
    prefix = (MONITOR_ENDPOINT_PATH if endpoint_path is None else endpoint_path).rstrip("/")
    monitor_path = f"{prefix}/monitor"

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(monitor_path)
    async def notify_by_path(request: Request) -> list[str]:
        """Refresh every service whose configuration file appears in the notification."""
        state = request.app.state
        body = await _read_body(request)
        bind_context(bus_id=state.bus_id)
        try:
            try:
                notification = state.extractor.extract(request.headers, body)
            except NotificationExtractionError as e:
                logger.warning("monitor.extract_error", error=str(e))
                raise HTTPException(status_code=400, detail=str(e)) from e
            # Sinks are synchronous and may block on I/O
            services = await run_in_threadpool(
                process_notification, notification, make_publisher(state.sink, state.bus_id)
            )
            logger.info("monitor.notified", count=len(services))
            return services
        finally:
            clear_context()

    logger.debug("monitor.app_created", path=monitor_path, bus_id=app.state.bus_id)
    return app
