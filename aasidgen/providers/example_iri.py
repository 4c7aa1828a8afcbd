"""IRI-style identifiers under a configurable base address.

Example:
    >>> provider = ExampleIriIdProvider("https://example.com/ids/")
    >>> provider.get_submodel_id("Motor1", "Nameplate").startswith("https://example.com/ids/sm/")
    True
    >>> provider.get_shell_id("Motor1").startswith("AssetAdministrationShell---")
    True
"""

from __future__ import annotations

from typing import Optional, Union

from .. import digest
from ..options import DEFAULT_BASE_IRI, DigitsMode, parse_digits_mode
from .base import IdProvider

DIGIT_BODY_LENGTH = 16
HEX_BODY_LENGTH = 8
SHELL_ID_PREFIX = "AssetAdministrationShell---"
CONCEPT_DESCRIPTION_ID_PREFIX = "ConceptDescription---"


def normalize_base_iri(base_iri: Optional[str]) -> str:
    """Return the base address with trailing slashes removed, or the default when blank.

    Example:
        >>> normalize_base_iri("  "), normalize_base_iri("https://acme.test/aas//")
        ('https://example.com/ids', 'https://acme.test/aas')
    """
    if base_iri is None or not base_iri.strip():
        return DEFAULT_BASE_IRI
    return base_iri.rstrip("/")


class ExampleIriIdProvider(IdProvider):
    """Provider producing ``<base>/asset/dddd_dddd_dddd_dddd`` style identifiers.

    Asset and submodel bodies follow ``digits_mode``; shell and concept
    description identifiers always use the seed digest.
    """

    scheme = "example_iri"

    def __init__(
        self,
        base_iri: Optional[str] = DEFAULT_BASE_IRI,
        digits_mode: Union[DigitsMode, str, None] = DigitsMode.DETERMINISTIC_HASH,
        *,
        max_attempts: Optional[int] = None,
    ):
        super().__init__(max_attempts=max_attempts)
        self.base_iri = normalize_base_iri(base_iri)
        self.digits_mode = parse_digits_mode(digits_mode)

    def get_asset_id(self, aas_id_short: str) -> str:
        return self._get_or_create(f"asset:{aas_id_short}", lambda seed: self._digit_iri("asset", seed))

    def get_submodel_id(self, aas_id_short: str, submodel_id_short: str) -> str:
        return self._get_or_create(
            f"sm:{aas_id_short}:{submodel_id_short}",
            lambda seed: self._digit_iri("sm", seed),
        )

    def get_shell_id(self, aas_id_short: str) -> str:
        return self._get_or_create(
            f"shell:{aas_id_short}",
            lambda seed: SHELL_ID_PREFIX + digest.take_hex(seed, HEX_BODY_LENGTH),
        )

    def get_concept_description_id(self, id_short: str) -> str:
        return self._get_or_create(
            f"concept:{id_short}",
            lambda seed: CONCEPT_DESCRIPTION_ID_PREFIX + digest.take_hex(seed, HEX_BODY_LENGTH),
        )

    def _digits(self, seed: str) -> str:
        if self.digits_mode is DigitsMode.RANDOM_SECURE:
            return digest.random_digits(DIGIT_BODY_LENGTH)
        return digest.take_decimal_digits(seed, DIGIT_BODY_LENGTH)

    def _digit_iri(self, segment: str, seed: str) -> str:
        return f"{self.base_iri}/{segment}/{digest.group_digits(self._digits(seed))}"
