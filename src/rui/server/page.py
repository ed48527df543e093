"""Bootstrap document served at ``/``."""

from html import escape

from ..core.config import POPUP_LAYER_ID, ROOT_VIEW_ID, AppParams


def start_page(params: AppParams, socket_path: str = "/ws") -> str:
    """
    The page every session starts from.

    The style tag is filled by ``setStyles`` once the session starts; the
    client script opens the websocket on load.
    """
    head = [
        '<meta charset="utf-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{escape(params.title)}</title>",
    ]
    if params.title_icon:
        head.append(f'<link rel="icon" href="/{escape(params.title_icon)}">')
    head += [
        '<link rel="stylesheet" href="/app.css">',
        "<style></style>",
        f'<script>const socketPath = "{escape(socket_path)}";</script>',
        '<script src="/app.js"></script>',
    ]
    body = [
        f'<div class="ruiRoot" id="{ROOT_VIEW_ID}"></div>',
        f'<div class="ruiRoot" id="{POPUP_LAYER_ID}" style="visibility: hidden;"'
        ' onclick="clickEvent(this, event)"></div>',
    ]
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        + "\n".join(head)
        + "\n</head>\n<body>\n"
        + "\n".join(body)
        + "\n</body>\n</html>"
    )
