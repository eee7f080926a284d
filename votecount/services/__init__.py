from votecount.services.tally import InvalidVoteOption, TallyStore, normalize_tally

__all__ = [
    "InvalidVoteOption",
    "TallyStore",
    "normalize_tally",
]
