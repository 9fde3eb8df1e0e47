"""
handlers/default_handler.py
---------------------------
Index page and the bootstrap endpoints that reset the schema and load
demo data.
"""

from flask import Blueprint, render_template_string, request

from db import init_db
from utils.logger import get_logger

logger = get_logger(__name__)

default_bp = Blueprint("default", __name__)

INDEX_TEMPLATE = """<!doctype html>
<html>
<head><title>{{ title }}</title></head>
<body>
  <h1>{{ title }}</h1>
  <ul>
  {% for name in resources %}
    <li><code>/{{ name }}/</code> POST, PUT &middot; <code>/{{ name }}/&lt;id&gt;</code> GET, DELETE</li>
  {% endfor %}
  </ul>
  <p><a href="/dbinit/">Reset schema</a> &middot; <a href="/demodb/">Load demo data</a></p>
</body>
</html>
"""


@default_bp.route("/", methods=["GET"])
def index():
    """Welcome page for the API"""
    logger.info(f"{request.method} {request.path}")
    return render_template_string(
        INDEX_TEMPLATE,
        title="Simple Blog API",
        resources=["users", "posts", "comments"],
    )


@default_bp.route("/dbinit/", methods=["GET"])
def dbinit():
    """Drop and recreate all tables."""
    logger.info(f"{request.method} {request.path}")
    try:
        init_db.init_schema()
    except Exception as e:
        logger.error(f"cannot init schema: {e}")
        return "DB is not initialized", 500
    return "DB Initialized", 200


@default_bp.route("/demodb/", methods=["GET"])
def demodb():
    """Insert the fixed demo rows."""
    logger.info(f"{request.method} {request.path}")
    try:
        init_db.add_demo_data()
    except Exception as e:
        logger.error(f"cannot add demo data: {e}")
        return "Demo data is not added", 500
    return "Demo data is added", 200
