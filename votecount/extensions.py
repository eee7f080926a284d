import redis

from votecount.services import TallyStore

EXTENSION_KEY = "tally_store"


def init_store(app, client=None):
    if client is None:
        client = redis.from_url(app.config["REDIS_URL"], decode_responses=True)
    store = TallyStore(client)
    app.extensions[EXTENSION_KEY] = store
    return store


def get_store(app):
    return app.extensions[EXTENSION_KEY]
