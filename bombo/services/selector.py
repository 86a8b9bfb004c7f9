from __future__ import annotations
import logging
import os
import random
import time
from typing import List, MutableSequence, Optional, Sequence, Tuple, TypeVar

from bombo.api.schemas import DrawResult, Winner
from bombo.core.errors import InsufficientParticipants, InvalidWinnerCount

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fresh_seed() -> int:
    """Seed mixing wall-clock nanoseconds with the PID, so runs started in
    the same instant from different processes don't share a sequence."""
    return time.time_ns() ^ (os.getpid() << 32)


def make_rng(seed: Optional[int] = None) -> Tuple[random.Random, int]:
    if seed is None:
        seed = fresh_seed()
    return random.Random(seed), seed


def validate_winner_count(n: int, pool_size: int) -> None:
    if n <= 0:
        raise InvalidWinnerCount(n)
    if n > pool_size:
        raise InsufficientParticipants(n, pool_size)


def shuffle_participants(items: MutableSequence[T], rng: random.Random) -> MutableSequence[T]:
    """In-place Fisher–Yates shuffle.

    For each i in [0, L-2], swap position i with a uniform j in [i, L-1].
    Every one of the L! orderings is equally likely.
    """
    last = len(items) - 1
    for i in range(last):
        j = rng.randint(i, last)
        items[i], items[j] = items[j], items[i]
    return items


def pick_winners(participants: Sequence[T], n: int, rng: random.Random) -> List[T]:
    """Shuffle a copy of the pool and return its first `n` entries.

    The caller's sequence is left untouched. Duplicate entries are separate
    slots and may both win.
    """
    validate_winner_count(n, len(participants))
    pool = list(participants)
    shuffle_participants(pool, rng)
    return pool[:n]


def draw(participants: Sequence[str], n: int, seed: Optional[int] = None, source: str = "") -> DrawResult:
    rng, used_seed = make_rng(seed)
    logger.info(f"Drawing {n} of {len(participants)} participants (seed={used_seed})")
    chosen = pick_winners(participants, n, rng)
    return DrawResult(
        source=source,
        pool_size=len(participants),
        requested=n,
        seed=used_seed,
        winners=[Winner(position=i + 1, name=name) for i, name in enumerate(chosen)],
    )
