from flask import Flask

from votecount.config import Config
from votecount.extensions import init_store
from votecount.routes import register_routes


def create_app(test_config=None, store=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    init_store(app, client=store)
    register_routes(app)
    return app


app = create_app()

__all__ = ["app", "create_app"]
