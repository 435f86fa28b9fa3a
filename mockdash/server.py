import time
from typing import Optional

from flask import Flask, g, request
from flask_caching import Cache
from werkzeug.exceptions import HTTPException

from .api import create_api
from .cache import CacheFacade
from .config import Settings, get_settings
from .log import get_logger
from .service import MockDataService
from .utils import Clock, system_clock, to_iso

logger = get_logger("mockdash.server")


class ServerFactory:
    """Class-based factory for the Flask server, response cache and API."""

    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> None:
        # Initialize settings once, defaulting to .env + env vars
        self.settings = settings or get_settings()
        self.clock = clock or system_clock

    def create_server(self) -> Flask:
        server = Flask(__name__)

        @server.route("/health")
        def health():
            return {"status": "ok", "time": to_iso(self.clock())}

        @server.before_request
        def start_timer():
            g.request_started = time.perf_counter()

        @server.after_request
        def log_request(response):
            started = g.get("request_started")
            elapsed_ms = int((time.perf_counter() - started) * 1000) if started is not None else 0
            logger.info("%s %s - %s - %sms", request.method, request.path, response.status_code, elapsed_ms)
            return response

        @server.errorhandler(404)
        def not_found(_e):
            return {"error": "Not Found"}, 404

        @server.errorhandler(Exception)
        def internal_error(e):
            if isinstance(e, HTTPException):
                return {"error": e.description}, e.code
            logger.exception("Unhandled error on %s %s", request.method, request.path)
            return {"error": "Internal Server Error"}, 500

        return server

    def create_cache(self, server: Flask) -> Cache:
        cache = Cache(server, config={
            "CACHE_TYPE": self.settings.cache_type,
            "CACHE_DEFAULT_TIMEOUT": self.settings.cache_timeout_seconds,
            "CACHE_THRESHOLD": self.settings.cache_threshold,
            **({"CACHE_REDIS_URL": self.settings.redis_url} if self.settings.cache_type == "RedisCache" else {})
        })
        return cache

    def create_service(self) -> MockDataService:
        return MockDataService(settings=self.settings, clock=self.clock)

    def register_api(self, server: Flask, cache: Optional[Cache]) -> None:
        facade = CacheFacade(cache, timeout_seconds=self.settings.cache_timeout_seconds)
        server.register_blueprint(create_api(self.create_service(), facade, self.settings))

    def build(self) -> Flask:
        """Fully wired server: routes, cache and API blueprint."""
        server = self.create_server()
        cache = self.create_cache(server)
        self.register_api(server, cache)
        logger.info("%s ready (env=%s, cache=%s)", self.settings.app_title,
                    self.settings.app_env, self.settings.cache_type)
        return server


# Backward-compatible function wrappers using a shared factory instance
_factory = ServerFactory()


def create_server() -> Flask:
    return _factory.create_server()


def create_cache(server: Flask) -> Cache:
    return _factory.create_cache(server)


def register_api(server: Flask, cache: Optional[Cache]) -> None:
    _factory.register_api(server, cache)
