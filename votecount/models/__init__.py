from votecount.models.tally import VOTE_OPTIONS, Tally

__all__ = [
    "Tally",
    "VOTE_OPTIONS",
]
