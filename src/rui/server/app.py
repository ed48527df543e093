"""
HTTP Front Door
FastAPI application serving the bootstrap page, the client resources and
the session websocket.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, Callable, Optional

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse, HTMLResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST
from returns.pipeline import is_successful

from ..core.config import AppParams, Settings, get_settings
from ..core.errors import report_error
from ..core.logging_config import configure_logging, get_logger
from ..core.metrics import metrics_collector
from ..data import parse_data_result
from ..session import Session
from ..theme import add_resources, package_text, resources
from .application import START_SESSION, Application
from .bridge import WebSocketBridge
from .page import start_page

logger = get_logger(__name__)

_CLIENT_FILES = {
    "app.js": "text/javascript; charset=utf-8",
    "app.css": "text/css; charset=utf-8",
}


def create_app(params: AppParams, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application of one UI application.

    Args:
        params: Title, auto-close window and the content factory
        settings: Server settings; environment defaults when omitted
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("rui_server_starting", title=params.title, socket_path=settings.socket_path)
        if settings.resources_path:
            add_resources(settings.resources_path)
        app.state.application = Application(params)
        yield
        logger.info("rui_server_shutting_down")
        app.state.application.close()

    app = FastAPI(title=params.title or "RUI", lifespan=lifespan)
    page = start_page(params, settings.socket_path)

    @app.get("/", response_class=HTMLResponse)
    async def root() -> str:
        return page

    if settings.enable_metrics:

        @app.get("/metrics")
        async def metrics() -> Response:
            return Response(content=metrics_collector.get_metrics(), media_type=CONTENT_TYPE_LATEST)

    @app.websocket(settings.socket_path)
    async def session_socket(websocket: WebSocket) -> None:
        await websocket.accept()
        bridge = WebSocketBridge(websocket, asyncio.get_running_loop(), params.getter_timeout)
        bridge.start()
        await serve_socket(app.state.application, websocket, bridge)

    @app.get("/{name:path}")
    async def resource(name: str) -> Response:
        name = name.rstrip("/")
        if name in _CLIENT_FILES:
            return Response(content=package_text(name), media_type=_CLIENT_FILES[name])
        path = resources.resource_file(name)
        if path is None:
            logger.debug("resource_not_found", name=name)
            raise HTTPException(status_code=404, detail=f"{name} not found")
        return FileResponse(path)

    return app


async def serve_socket(application: Application, websocket: WebSocket, bridge: WebSocketBridge) -> None:
    """Read inbound frames until the browser goes away."""
    session: Session | None = None
    try:
        while True:
            text = await websocket.receive_text()
            result = parse_data_result(text)
            if not is_successful(result):
                report_error(result.failure(), source="websocket")
                continue
            message = result.unwrap()

            if message.tag == START_SESSION:
                session = application.start_session(message, bridge)
                if session is None:
                    await websocket.close(code=1011)
                    return
            elif session is None:
                logger.warning("message_before_start_session", command=message.tag)
            else:
                session.post(message)
                if message.tag == "session-close":
                    application.remove_session(session.id)
    except WebSocketDisconnect:
        logger.info("websocket_disconnected", session_id=session.id if session else None)
    finally:
        if session is not None:
            application.disconnected(session, bridge)
        else:
            bridge.close()
        await bridge.wait_closed()


def start_app(
    content_factory: Callable[[], Any],
    params: Optional[AppParams] = None,
    settings: Optional[Settings] = None,
) -> None:
    """Serve an application with uvicorn until interrupted."""
    import uvicorn

    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    if params is None:
        params = AppParams.from_settings(content_factory, settings)
    elif params.content_factory is None:
        params = params.model_copy(update={"content_factory": content_factory})
    app = create_app(params, settings)
    logger.info("rui_server_listening", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
