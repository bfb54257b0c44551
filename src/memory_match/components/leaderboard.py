from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LeaderboardEntry:
    name: str
    score: int

    def to_record(self) -> dict:
        return {"name": self.name, "score": self.score}
