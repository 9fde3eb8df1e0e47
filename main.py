"""
main.py
-------
Entry point for the Simple Blog API.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Build the Flask application with all blueprints.
    - Serve HTTP until interrupted, then release the pool.
"""

from app import create_app
from config import DEBUG, HTTP_HOST, HTTP_PORT
from db.connection import close_pool, init_pool
from db.init_db import create_tables
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Initialize and run the API server."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 2. Build the application ──────────────────────────
    app = create_app()

    # ── 3. Serve ──────────────────────────────────────────
    logger.info(f"Simple Blog API listening on {HTTP_HOST}:{HTTP_PORT}")
    try:
        app.run(host=HTTP_HOST, port=HTTP_PORT, debug=DEBUG, threaded=True, use_reloader=False)
    finally:
        # ── 4. Cleanup on shutdown ────────────────────────
        close_pool()
        logger.info("Simple Blog API stopped.")


if __name__ == "__main__":
    main()
