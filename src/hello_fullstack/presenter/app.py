"""
Presenter Host
==============
Serves the Presenter as a page. Each page load mounts a fresh Presenter.

Run with:
    uvicorn hello_fullstack.presenter.app:app --port 3000
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from hello_fullstack.config import Settings, settings as default_settings
from hello_fullstack.presenter.view import ClientFactory, Presenter

_logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Hello</title>
</head>
<body>
<div id="root">{body}</div>
</body>
</html>
"""


def create_frontend_app(
    settings: Optional[Settings] = None,
    client_factory: Optional[ClientFactory] = None,
) -> FastAPI:
    """Build the page host that fetches from ``settings.BACKEND_URL``."""
    cfg = settings or default_settings

    application = FastAPI(
        title="Greeting Presenter",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @application.get("/", response_class=HTMLResponse)
    async def page() -> str:
        """Mount a Presenter and return the rendered document."""
        presenter = Presenter(cfg.BACKEND_URL, client_factory=client_factory)
        await presenter.mount()
        return PAGE_TEMPLATE.format(body=presenter.render())

    return application


app = create_frontend_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.FRONTEND_HOST, port=default_settings.FRONTEND_PORT)
