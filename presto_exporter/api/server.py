"""HTTP server exposing the scrape endpoint and a landing page.

Rendering runs in a worker thread because the collector blocks on the
cluster request; concurrent scrapes therefore proceed in parallel and a slow
cluster only stalls its own request.
"""

import asyncio
import logging

from aiohttp import web

from presto_exporter.core.protocols.metrics import MetricsRenderer

logger = logging.getLogger(__name__)

_LANDING_PAGE = """<html>
<head><title>Presto Exporter</title></head>
<body>
<h1>Presto Exporter</h1>
<p><a href="{path}">Metrics</a></p>
</body>
</html>
"""


class MetricsServer:
    """Lightweight aiohttp server serving the telemetry path for Prometheus scraping."""

    def __init__(
        self,
        renderer: MetricsRenderer,
        port: int,
        host: str = "0.0.0.0",
        telemetry_path: str = "/metrics",
    ) -> None:
        """Initialize the metrics server on the given host and port."""
        self._renderer = renderer
        self._port = port
        self._host = host
        self._telemetry_path = telemetry_path
        self._runner: web.AppRunner | None = None

    def build_app(self) -> web.Application:
        """Create the application with its two routes."""
        app = web.Application()
        app.router.add_get(self._telemetry_path, self._handle_metrics)
        if self._telemetry_path != "/":
            app.router.add_get("/", self._handle_index)
        return app

    async def start(self) -> None:
        """Start the metrics server.

        Raises:
            OSError: If the listen socket cannot be bound.
        """
        self._runner = web.AppRunner(self.build_app())
        await self._runner.setup()
        site = web.TCPSite(self._runner, self._host, self._port)
        try:
            await site.start()
        except OSError:
            await self.stop()
            raise
        logger.info("Listening on %s:%s", self._host, self.port)

    async def stop(self) -> None:
        """Stop the metrics server."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None

    @property
    def port(self) -> int:
        """Bound port once started, otherwise the configured one."""
        if self._runner is not None:
            for site in self._runner.sites:
                server = getattr(site, "_server", None)
                if server is not None and server.sockets:
                    return server.sockets[0].getsockname()[1]
        return self._port

    async def _handle_metrics(self, request: web.Request) -> web.Response:
        """Return Prometheus metrics in text exposition format."""
        body = await asyncio.to_thread(self._renderer.generate)
        return web.Response(
            body=body,
            headers={"Content-Type": self._renderer.content_type},
        )

    async def _handle_index(self, request: web.Request) -> web.Response:
        """Return the landing page linking to the telemetry path."""
        return web.Response(
            text=_LANDING_PAGE.format(path=self._telemetry_path),
            content_type="text/html",
        )
