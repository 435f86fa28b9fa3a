from . import config
from .server import create_server, create_cache, register_api

# Assemble
server = create_server()
cache = create_cache(server)

# Init subsystems
register_api(server, cache)

__all__ = ["server", "cache"]
