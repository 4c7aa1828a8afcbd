"""Identifier provider contract shared by every scheme."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..ledger import AllocationLedger, Generator


class IdProvider(ABC):
    """Abstract identifier provider for one conversion run.

    Every operation is idempotent per seed and never hands out the same
    identifier for two different seeds. Instances are not thread-safe.
    """

    scheme: str = ""

    def __init__(self, *, max_attempts: Optional[int] = None):
        self._ledger = AllocationLedger(max_attempts=max_attempts)

    @abstractmethod
    def get_asset_id(self, aas_id_short: str) -> str:
        """Return the global asset identifier for a shell's asset."""
        raise NotImplementedError

    @abstractmethod
    def get_submodel_id(self, aas_id_short: str, submodel_id_short: str) -> str:
        """Return the identifier of a submodel within a shell."""
        raise NotImplementedError

    @abstractmethod
    def get_shell_id(self, aas_id_short: str) -> str:
        """Return the identifier of an asset administration shell."""
        raise NotImplementedError

    @abstractmethod
    def get_concept_description_id(self, id_short: str) -> str:
        """Return the identifier of a concept description."""
        raise NotImplementedError

    @property
    def issued_count(self) -> int:
        return len(self._ledger)

    def _get_or_create(self, seed: str, generator: Generator) -> str:
        return self._ledger.get_or_create(seed, generator)
