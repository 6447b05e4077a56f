"""Seeded random streams for maze generation.

Generators never touch the global ``random`` module. Each algorithm draws from
its own stream derived from one master seed, so a maze is reproducible from
the seed alone and carving with one algorithm never shifts the sequence seen
by the other.

Usage:
    from mazestack.util import rng
    rng.init(config.RANDOM_SEED)

    _rng = rng.get("maze.prims")
    index = _rng.randrange(len(frontier))

Callers that want full control (tests, the CLI) can skip the module-level
provider and pass a plain ``random.Random`` to a generator instead.

Domain names in use:
    - "maze.depth_first"
    - "maze.prims"
"""

from __future__ import annotations

import zlib
from collections.abc import MutableSequence, Sequence
from random import Random
from typing import TYPE_CHECKING, TypeAlias, TypeVar

if TYPE_CHECKING:
    from mazestack.types import RandomSeed

T = TypeVar("T")


class RNGStream:
    """Proxy that forwards to the current ``Random`` for one domain.

    A cached stream keeps working after ``reset()``; the underlying generator
    is looked up from the provider on every call.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng().random()

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        """Return randomly selected element from range(start, stop, step)."""
        return self._rng().randrange(start, stop, step)

    def randint(self, a: int, b: int) -> int:
        """Return random integer N such that a <= N <= b."""
        return self._rng().randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        """Return random element from non-empty sequence."""
        return self._rng().choice(seq)

    def shuffle(self, x: MutableSequence) -> None:
        """Shuffle x in place."""
        self._rng().shuffle(x)

    def __repr__(self) -> str:
        return f"<RNGStream domain={self._domain!r}>"


# Anything a generator can draw from.
RNG: TypeAlias = "Random | RNGStream"


class RNGProvider:
    """Hands out one isolated stream per domain, derived from a master seed."""

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """Return the (cacheable) stream proxy for ``domain``."""
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        if domain not in self._streams:
            if self._master_seed is None:
                self._streams[domain] = Random()
            else:
                # crc32 rather than hash(): str hashing is salted per process
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = Random(derived_seed)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Drop every stream and start over from ``master_seed``.

        Proxies handed out earlier stay valid and pick up the new streams.
        """
        self._master_seed = master_seed
        self._streams.clear()


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Initialize (or re-seed) the global provider."""
    global _provider
    if _provider is not None:
        _provider.reset(master_seed)
    else:
        _provider = RNGProvider(master_seed)


def get(domain: str) -> RNGStream:
    """Return the stream for ``domain``, creating an unseeded provider if needed."""
    global _provider
    if _provider is None:
        _provider = RNGProvider(None)
    return _provider.get(domain)
