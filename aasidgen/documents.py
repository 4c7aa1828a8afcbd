"""Sequential document identifiers for documentation submodels."""

from __future__ import annotations

import logging
from typing import Optional

from .options import DEFAULT_DOCUMENT_ID_SEED

logger = logging.getLogger(__name__)

DOCUMENT_ID_WIDTH = 8


class DocumentIdGenerator:
    """Hands out zero-padded document ids counting up from ``seed``.

    Example:
        >>> generator = DocumentIdGenerator(42)
        >>> generator.next_id(), generator.next_id()
        ('00000042', '00000043')
    """

    def __init__(self, seed: int = DEFAULT_DOCUMENT_ID_SEED):
        if seed < 0:
            raise ValueError("Document id seed must be non-negative.")
        self._next_id = seed

    def next_id(self) -> str:
        current = self._next_id
        self._next_id += 1
        return str(current).zfill(DOCUMENT_ID_WIDTH)

    def create(
        self,
        name: Optional[str],
        doc_type: Optional[str],
        file_path: Optional[str],
    ) -> Optional[str]:
        """Return the next id, or ``None`` when the document has no content at all."""
        if all(value is None or not value.strip() for value in (name, doc_type, file_path)):
            logger.debug("Skipping document id for empty document entry")
            return None
        return self.next_id()
