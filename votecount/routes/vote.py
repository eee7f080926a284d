from flask import current_app, jsonify, make_response, request
from redis import RedisError
from werkzeug.exceptions import BadRequest

from votecount.extensions import get_store
from votecount.models import VOTE_OPTIONS

NO_CACHE = "no-cache, no-store, max-age=0, must-revalidate"


class InvalidBody(ValueError):
    pass


def _error(message, status):
    return jsonify({"error": message}), status


def _read_json_body():
    if not request.get_data().strip():
        return {}
    try:
        payload = request.get_json(force=True)
    except BadRequest as exc:
        raise InvalidBody("Invalid JSON body") from exc
    if not isinstance(payload, dict):
        raise InvalidBody("Invalid JSON body")
    return payload


def _non_empty_string(value):
    return isinstance(value, str) and value != ""


def register_vote_routes(app):
    @app.after_request
    def add_response_headers(response):
        response.headers["Access-Control-Allow-Origin"] = app.config["CORS_ALLOW_ORIGIN"]
        response.headers["Cache-Control"] = NO_CACHE
        return response

    @app.route("/api/vote", methods=["GET", "POST", "OPTIONS"])
    def vote():
        if request.method == "OPTIONS":
            response = make_response("", 204)
            response.headers["Access-Control-Allow-Methods"] = app.config[
                "CORS_ALLOW_METHODS"
            ]
            response.headers["Access-Control-Allow-Headers"] = app.config[
                "CORS_ALLOW_HEADERS"
            ]
            return response

        store = get_store(current_app)

        if request.method != "POST":
            poll_id = request.args.get("pollId")
            if not poll_id:
                current_app.logger.warning("Tally read rejected: missing pollId")
                return _error("pollId is required", 400)

            return jsonify(store.get_tally(poll_id).to_dict())

        try:
            payload = _read_json_body()
        except InvalidBody as exc:
            current_app.logger.warning("Vote rejected: %s", exc)
            return _error(str(exc), 400)

        poll_id = payload.get("pollId")
        vote_type = payload.get("voteType")
        if not _non_empty_string(poll_id) or not _non_empty_string(vote_type):
            current_app.logger.warning("Vote rejected: missing pollId or voteType")
            return _error("pollId and voteType are required", 400)
        if vote_type not in VOTE_OPTIONS:
            current_app.logger.warning("Vote rejected: invalid voteType %r", vote_type)
            return _error("Invalid voteType", 400)

        tally = store.increment_tally(poll_id, vote_type)
        current_app.logger.info("Recorded %s vote for poll %s", vote_type, poll_id)
        return jsonify(tally.to_dict())

    @app.route("/api/health")
    def health():
        try:
            get_store(current_app).ping()
        except RedisError:
            current_app.logger.exception("Tally store health check failed")
            return jsonify({"status": "error"}), 503
        return jsonify({"status": "ok"})
