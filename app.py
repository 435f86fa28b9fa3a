# Thin entrypoint exposing the Flask `server`
from mockdash import server  # noqa: F401
from mockdash import config
from mockdash.log import get_logger


if __name__ == "__main__":  # pragma: no cover
    # For production: use gunicorn, e.g.:
    # gunicorn app:server -c gunicorn.conf.py
    get_logger("mockdash").info("Server running on http://localhost:%s", config.PORT)
    server.run(host="0.0.0.0", port=config.PORT, debug=config.DEBUG)
