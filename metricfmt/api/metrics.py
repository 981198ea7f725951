"""Sidecar HTTP server exposing /metrics with format negotiation."""

import traceback
from typing import Optional

from aiohttp import web

from metricfmt.core.config import settings
from metricfmt.core.logging import logger
from metricfmt.core.protocols.metrics_renderer import MetricsRenderer


class MetricsServer:
    """Async metrics server backed by a MetricsRenderer.

    Each scrape passes the request's Accept header to the renderer and
    echoes the negotiated Content-Type back to the scraper.
    """

    def __init__(
        self,
        renderer: MetricsRenderer,
        port: int = settings.METRICS_PORT,
        host: str = settings.METRICS_HOST,
        path: str = settings.METRICS_PATH,
    ):
        """Initialize the metrics server.

        Args:
            renderer: Serializes collected metrics for each scrape.
            port: The port to listen on.
            host: The host to listen on.
            path: The route that serves metrics.
        """
        self.renderer = renderer
        self.port = port
        self.host = host
        self.path = path
        self.app = web.Application()
        self.app.add_routes([web.get(path, self.metrics_handler)])
        self.runner: Optional[web.AppRunner] = None
        self.site: Optional[web.TCPSite] = None
        self.logger = logger.with_context(
            context_base="metrics_server",
            operation="serve",
            path=path,
        )

    async def metrics_handler(self, request: web.Request) -> web.Response:
        """Render metrics in the format negotiated from the Accept header.

        Args:
            request: The scrape request.

        Returns:
            The rendered metrics, or a 500 if rendering failed.
        """
        try:
            body, content_type = self.renderer.render(request.headers.get("Accept"))
        except Exception as e:
            self.logger.error(f"Error rendering metrics: {e}\n{traceback.format_exc()}")
            return web.Response(text="Error\n", status=500)
        return web.Response(body=body, status=200, headers={"Content-Type": content_type})

    async def start(self) -> None:
        """Start the AIOHTTP server."""
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()
        self.site = web.TCPSite(self.runner, host=self.host, port=self.port)
        await self.site.start()
        self.logger.info(f"Metrics server listening on http://{self.host}:{self.port}{self.path}")

    async def stop(self) -> None:
        """Stops the server gracefully."""
        if self.site:
            await self.site.stop()
        if self.runner:
            await self.runner.cleanup()
        self.logger.info("Metrics server stopped")
