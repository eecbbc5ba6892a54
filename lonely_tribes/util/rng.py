"""Deterministic random number generation with isolated streams.

Each generation stage (room carving, player spawning, ...) draws from its own
random stream derived from the level seed. This ensures that:

1. A level is fully deterministic from its seed
2. Changes to one stage's random consumption don't shift the others
3. Adding/removing stages doesn't change the sequences of existing stages

A provider is created per generation run, so no random state is shared
between two levels:

    provider = RNGProvider(seed)
    rooms_rng = provider.get("map.rooms")
    count = rooms_rng.randint(3, 8)

Domain naming convention (hierarchical):
    - "map.rooms", "map.players"
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lonely_tribes.types import RandomSeed


class RNGStream:
    """Proxy that delegates to the RNG of a domain.

    The wrapper can be cached by callers. Only the draws the generators use
    are forwarded; the underlying Random instance is created lazily by the
    provider on the first draw.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        """Get the current underlying RNG."""
        return self._provider._get_raw(self._domain)

    # -------------------------------------------------------------------------
    # Random method proxies
    # -------------------------------------------------------------------------

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng().randint(a, b)

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        """Return randomly selected element from range(start, stop, step)."""
        return self._rng().randrange(start, stop, step)


# Type alias for functions that accept either Random or RNGStream.
# Use this in type hints: `def foo(rng: RNG) -> int:`
type RNG = Random | RNGStream


class RNGProvider:
    """Provides isolated RNG streams for the stages of one generation run.

    Each domain gets its own Random instance derived deterministically
    from the master seed. Domains are identified by string names.
    """

    def __init__(self, master_seed: RandomSeed) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """Get an RNG stream for the named domain.

        Args:
            domain: Hierarchical name like "map.rooms" or "map.players"

        Returns:
            An RNGStream proxy with the same interface as Random
        """
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        """Get the raw Random instance for a domain (internal use)."""
        if domain not in self._streams:
            # Use crc32 instead of hash() - hash() is randomized per Python
            # session via PYTHONHASHSEED, which would break cross-session
            # determinism
            derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
            self._streams[domain] = Random(derived_seed)
        return self._streams[domain]
