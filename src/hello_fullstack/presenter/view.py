"""Presenter view — one fetch on mount, one text node on render."""

from __future__ import annotations

import html
import logging
from typing import Callable

import httpx

from hello_fullstack.config import settings

_logger = logging.getLogger(__name__)

CONTAINER_STYLE = "margin: 30px; background-color: #000"

ClientFactory = Callable[[], httpx.AsyncClient]


def _default_client() -> httpx.AsyncClient:
    # No timeout: an unanswered request leaves the view as it was.
    return httpx.AsyncClient(timeout=None)


class Presenter:
    """Holds the fetched message as view state and renders it as HTML.

    ``mount()`` runs its fetch at most once per instance. A transport
    failure leaves ``message`` empty; nothing is shown to the user.
    """

    def __init__(
        self,
        backend_url: str | None = None,
        *,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self.backend_url = backend_url or settings.BACKEND_URL
        self.message = ""
        self._client_factory = client_factory or _default_client
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    async def mount(self) -> None:
        """Fetch the greeting and store the body text in view state."""
        if self._mounted:
            return
        self._mounted = True

        try:
            async with self._client_factory() as client:
                response = await client.get(self.backend_url)
        except httpx.HTTPError as exc:
            _logger.warning("fetch %s failed: %s", self.backend_url, exc)
            return

        self.message = response.text
        _logger.debug("stored %d chars from %s", len(self.message), self.backend_url)

    def render(self) -> str:
        return (
            f'<div style="{CONTAINER_STYLE}">'
            f"<p>{html.escape(self.message)}</p>"
            "</div>"
        )
