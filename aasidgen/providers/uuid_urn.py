"""Hash-derived ``urn:uuid:`` identifiers."""

from __future__ import annotations

from uuid import UUID

from .. import digest
from .base import IdProvider


def stable_urn(seed: str) -> str:
    """Format the first 16 digest bytes of ``seed`` as a ``urn:uuid:`` token.

    The bytes are read in GUID field order (first three fields little-endian).

    Example:
        >>> stable_urn("asset:Pump7") == stable_urn("asset:Pump7")
        True
    """
    return UUID(bytes_le=digest.sha256_digest(seed)[:16]).urn


class UuidUrnIdProvider(IdProvider):
    """Fully deterministic provider; there is no random mode."""

    scheme = "uuid_urn"

    def get_asset_id(self, aas_id_short: str) -> str:
        return self._get_or_create(f"asset:{aas_id_short}", stable_urn)

    def get_submodel_id(self, aas_id_short: str, submodel_id_short: str) -> str:
        return self._get_or_create(f"submodel:{aas_id_short}:{submodel_id_short}", stable_urn)

    def get_shell_id(self, aas_id_short: str) -> str:
        return self._get_or_create(f"aas:{aas_id_short}", stable_urn)

    def get_concept_description_id(self, id_short: str) -> str:
        return self._get_or_create(f"concept:{id_short}", stable_urn)
