"""
handlers/resource_handler.py
----------------------------
JSON-over-HTTP endpoints for one blog resource (users, posts, comments).
Parses the request, delegates to the repository, and maps the outcome
to a status code. No business logic lives here.

    GET    /<name>/<id>   read
    POST   /<name>/       create
    PUT    /<name>/       partial update (body carries the id)
    DELETE /<name>/<id>   delete, responds with the deleted record
"""

import re

from flask import Blueprint, jsonify, request
from psycopg2.extensions import QueryCanceledError

from db.errors import MalformedRequest, RepositoryError
from repositories.base import CrudRepository
from utils.logger import get_logger

logger = get_logger(__name__)

_ID_RE = re.compile(r"[+-]?[0-9]+")

# Ids live in PostgreSQL INT columns.
MIN_ID = -(2 ** 31)
MAX_ID = 2 ** 31 - 1


def parse_id(raw: str) -> int:
    """Parse an ASCII decimal path id within the INT range or raise MalformedRequest."""
    if not _ID_RE.fullmatch(raw) or len(raw.lstrip("+-").lstrip("0")) > 10:
        raise MalformedRequest(f"bad id: {raw}")
    try:
        value = int(raw)
    except ValueError as e:
        raise MalformedRequest(f"bad id: {raw}") from e
    if not MIN_ID <= value <= MAX_ID:
        raise MalformedRequest(f"bad id: {raw}")
    return value


def parse_body() -> dict:
    """Decode the request body as a JSON object, whatever the Content-Type."""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise MalformedRequest("bad json: request body must be a JSON object")
    return data


def _error(op: str, resource: str, err: Exception):
    msg = f"{op} {resource} error: {err}"
    return jsonify({"error": msg}), 500


def resource_blueprint(name: str, model: type, repo: CrudRepository) -> Blueprint:
    """
    Build the blueprint serving one resource.

    Args:
        name: Plural resource name, also the URL prefix (e.g. "users").
        model: Record class used to decode request bodies.
        repo: Repository the endpoints delegate to.
    """
    bp = Blueprint(name, __name__, url_prefix=f"/{name}")
    resource = repo.resource

    @bp.route("/<raw_id>", methods=["GET"])
    def get_one(raw_id: str):
        logger.info(f"{request.method} {request.path}")
        try:
            record_id = parse_id(raw_id)
        except MalformedRequest as e:
            logger.warning(f"bad param: {e}")
            return str(e), 400

        try:
            record = repo.read(record_id)
        except (RepositoryError, QueryCanceledError) as e:
            logger.warning(f"get {resource} error: {e}")
            return _error("get", resource, e)
        return jsonify(record.to_dict()), 200

    @bp.route("/", methods=["POST"])
    def create():
        logger.info(f"{request.method} {request.path}")
        try:
            record = model.from_dict(parse_body())
        except MalformedRequest as e:
            logger.error(f"bad json: {e}")
            return jsonify({"error": str(e)}), 400

        try:
            created = repo.create(record)
        except (RepositoryError, QueryCanceledError) as e:
            return _error("create", resource, e)
        return jsonify(created.to_dict()), 200

    @bp.route("/", methods=["PUT"])
    def update():
        logger.info(f"{request.method} {request.path}")
        try:
            data = parse_body()
            record = model.from_dict(data)
        except MalformedRequest as e:
            logger.error(f"bad json: {e}")
            return jsonify({"error": str(e)}), 400

        # Submitted keys decide what changes, so explicit zero values are kept.
        fields = [k for k in model.columns() if k in data]
        try:
            updated = repo.update(record, fields)
        except (RepositoryError, QueryCanceledError) as e:
            return _error("update", resource, e)
        return jsonify(updated.to_dict()), 200

    @bp.route("/<raw_id>", methods=["DELETE"])
    def delete(raw_id: str):
        logger.info(f"{request.method} {request.path}")
        try:
            record_id = parse_id(raw_id)
        except MalformedRequest as e:
            logger.warning(f"bad param: {e}")
            return str(e), 400

        try:
            deleted = repo.delete(record_id)
        except (RepositoryError, QueryCanceledError) as e:
            return _error("delete", resource, e)
        return jsonify(deleted.to_dict()), 200

    return bp
