from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def http_error(exc):
        # Keep headers such as Allow on 405, but not the HTML content type.
        headers = [
            (name, value)
            for name, value in exc.get_headers()
            if name.lower() != "content-type"
        ]
        return jsonify({"error": exc.name.capitalize()}), exc.code, headers

    @app.errorhandler(Exception)
    def unhandled_error(exc):
        current_app.logger.exception("Unhandled error while serving request")
        return jsonify({"error": "Internal Server Error"}), 500
