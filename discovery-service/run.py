import os
import sys
import logging
import uvicorn

logger = logging.getLogger("discovery.run")


def start():
    port_env = os.environ.get("PORT", "").strip()
    try:
        port = int(port_env) if port_env else 8080
    except ValueError:
        logger.warning(f"[RUN] PORT env var is not a number: '{port_env}'. Defaulting to 8080.")
        port = 8080
    host = os.environ.get("HOST", "0.0.0.0")

    sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
    from discovery.main import app

    logger.info(f"[RUN] Starting Uvicorn on {host}:{port}...")
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level="info",
        proxy_headers=True,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    start()
