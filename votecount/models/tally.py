from dataclasses import dataclass

VOTE_OPTIONS = ("ban", "keep")


@dataclass(frozen=True)
class Tally:
    ban: int = 0
    keep: int = 0

    def to_dict(self):
        return {"ban": self.ban, "keep": self.keep}
