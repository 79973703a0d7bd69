import logging
import os
import sys
import uvicorn
import socket

# SET DATABASE_URL BEFORE importing missionops modules!
# This ensures db.py uses SQLite instead of defaulting to PostgreSQL
if not os.getenv("DATABASE_URL"):
    db_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "missionops.db")
    # SQLite URL format: sqlite:///absolute/path/to/file.db (3 slashes for absolute)
    os.environ["DATABASE_URL"] = f"sqlite:///{db_path}"

from missionops.db import init_db
from missionops.main import app as fastapi_app, configure_logging

logger = logging.getLogger("missionops.start")


def find_free_port(start_port=8000, max_attempts=10):
    """Find a free port starting from start_port"""
    for port in range(start_port, start_port + max_attempts):
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
                s.bind(('127.0.0.1', port))
                return port
        except OSError:
            continue
    raise RuntimeError(f"Could not find a free port in range {start_port}-{start_port + max_attempts}")


if __name__ == "__main__":
    configure_logging()
    url = os.environ["DATABASE_URL"]
    if url.startswith("sqlite"):
        logger.info(f"[start] using SQLite database at {url}")
        init_db()

    try:
        port = find_free_port(8000)
    except RuntimeError as e:
        logger.error(f"[start] {e}")
        sys.exit(1)
    if port != 8000:
        logger.warning(f"[start] port 8000 in use, using port {port} instead")

    uvicorn.run(fastapi_app, host="127.0.0.1", port=port, reload=False)
