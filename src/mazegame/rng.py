import random
from dataclasses import dataclass, field
from typing import Protocol, Sequence


class IndexSource(Protocol):
    def index(self, n: int) -> int: ...


@dataclass
class EntropyIndex:
    """Uniform index in [0, n). Unseeded by default, so every maze differs."""
    rand: random.Random = field(default_factory=random.Random)

    def index(self, n: int) -> int:
        assert n > 0
        return self.rand.randrange(n)


@dataclass
class ScriptedIndex:
    """Replays a fixed index sequence (wrapping), reduced modulo n.

    Lets tests pin the exact carving order.
    """
    script: Sequence[int]
    pos: int = 0

    def index(self, n: int) -> int:
        assert n > 0
        assert self.script, "ScriptedIndex needs at least one entry"
        v = self.script[self.pos % len(self.script)]
        self.pos += 1
        return v % n
