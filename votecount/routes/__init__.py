from votecount.routes.errors import register_error_handlers
from votecount.routes.vote import register_vote_routes


def register_routes(app):
    register_error_handlers(app)
    register_vote_routes(app)
