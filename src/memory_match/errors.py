"""Exceptions raised by the game core.

Rejected flips and out-of-phase commands are ordinary return values; everything
in here is a configuration or programming error that should abort the caller.
"""


class MemoryMatchError(Exception):
    """Base class for core errors."""


class InvalidLevel(MemoryMatchError, ValueError):
    """A level outside the catalog was requested."""

    def __init__(self, level: object, max_level: int):
        super().__init__(f"level {level!r} is not in the catalog (1..{max_level})")
        self.level = level
        self.max_level = max_level


class InvalidRound(MemoryMatchError, ValueError):
    """A round number outside ``1..ROUNDS_PER_LEVEL`` was requested."""


class InsufficientSymbols(MemoryMatchError, RuntimeError):
    """The symbol pool cannot supply the distinct pairs a level needs."""

    def __init__(self, required: int, available: int):
        super().__init__(f"need {required} distinct symbols, pool has {available}")
        self.required = required
        self.available = available
