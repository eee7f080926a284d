"""Tally storage on top of a redis hash per poll.

Each poll is one hash keyed by its poll id, holding the ``ban`` and ``keep``
counters. Writes go through ``HINCRBY`` only, so concurrent voters never lose
updates and no locking is needed here.
"""

from collections.abc import Mapping

from votecount.models import VOTE_OPTIONS, Tally

# HINCRBY works on signed 64-bit integers.
MAX_COUNT = 2**63 - 1
MAX_COUNT_DIGITS = len(str(MAX_COUNT))


class InvalidVoteOption(ValueError):
    pass


def _coerce_count(value):
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    if isinstance(value, bytes):
        try:
            value = value.decode("ascii")
        except UnicodeDecodeError:
            return 0
    if isinstance(value, str) and value.isascii() and value.isdigit():
        if len(value) > MAX_COUNT_DIGITS:
            return 0
        count = int(value)
        return count if count <= MAX_COUNT else 0
    return 0


def _record_field(record, name):
    if name in record:
        return record[name]
    return record.get(name.encode("ascii"))


def normalize_tally(reply):
    """Turn whatever the store replied into a ``Tally``.

    Accepts an ordered pair (ban first, keep second), a mapping keyed by field
    name, or anything else, which reads as an empty poll.
    """
    if isinstance(reply, (list, tuple)):
        values = list(reply[: len(VOTE_OPTIONS)])
        values += [None] * (len(VOTE_OPTIONS) - len(values))
    elif isinstance(reply, Mapping):
        values = [_record_field(reply, name) for name in VOTE_OPTIONS]
    else:
        return Tally()

    ban, keep = (_coerce_count(value) for value in values)
    return Tally(ban=ban, keep=keep)


class TallyStore:
    def __init__(self, client):
        self.client = client

    def get_tally(self, poll_id):
        reply = self.client.hmget(poll_id, list(VOTE_OPTIONS))
        return normalize_tally(reply)

    def increment_tally(self, poll_id, option):
        if option not in VOTE_OPTIONS:
            raise InvalidVoteOption(f"Unknown vote option: {option!r}")

        self.client.hincrby(poll_id, option, 1)
        return self.get_tally(poll_id)

    def ping(self):
        return self.client.ping()
