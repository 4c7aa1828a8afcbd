"""Per-provider allocation ledger with the shared get-or-create probe."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Set

from .errors import IdSpaceExhaustedError

logger = logging.getLogger(__name__)

Generator = Callable[[str], str]


def attempt_seed(seed: str, attempt: int) -> str:
    """Return the seed used for one probe attempt.

    Example:
        >>> attempt_seed("shell:Motor1", 0), attempt_seed("shell:Motor1", 2)
        ('shell:Motor1', 'shell:Motor1#2')
    """
    return seed if attempt == 0 else f"{seed}#{attempt}"


@dataclass
class AllocationLedger:
    """Seed cache plus the set of every identifier issued so far.

    Not thread-safe: lookup and insert are not atomic as a pair.
    """

    max_attempts: Optional[int] = None
    cache: Dict[str, str] = field(default_factory=dict)
    issued: Set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1 when set.")

    def __contains__(self, seed: object) -> bool:
        return seed in self.cache

    def __len__(self) -> int:
        return len(self.cache)

    def get_or_create(self, seed: str, generator: Generator) -> str:
        """Return the identifier for ``seed``, generating a unique one on first use.

        Example:
            >>> ledger = AllocationLedger()
            >>> ledger.get_or_create("a", lambda s: "same")
            'same'
            >>> ledger.get_or_create("b", lambda s: "same" if "#" not in s else s)
            'b#1'
        """
        cached = self.cache.get(seed)
        if cached is not None:
            return cached

        attempt = 0
        while True:
            if self.max_attempts is not None and attempt >= self.max_attempts:
                raise IdSpaceExhaustedError(seed, attempt)
            candidate = generator(attempt_seed(seed, attempt))
            if candidate not in self.issued:
                self.issued.add(candidate)
                self.cache[seed] = candidate
                return candidate
            logger.debug("Identifier collision for seed %r on attempt %d", seed, attempt)
            attempt += 1
