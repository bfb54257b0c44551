from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LevelConfig:
    """Grid size, pair count and round length for one level."""

    level: int
    rows: int
    cols: int
    pair_count: int
    round_seconds: int

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"level must be >= 1, got {self.level}")
        for name in ("rows", "cols", "pair_count", "round_seconds"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive for level {self.level}")
        if self.rows * self.cols != self.pair_count * 2:
            raise ValueError(
                f"level {self.level}: {self.rows}x{self.cols} grid cannot hold {self.pair_count} pairs"
            )

    @property
    def card_count(self) -> int:
        return self.pair_count * 2
