"""Identifier scheme configuration.

Example:
    >>> from aasidgen.options import DigitsMode, IdOptions, IdScheme
    >>> options = IdOptions(id_scheme="UuidUrn")
    >>> options.id_scheme is IdScheme.UUID_URN, options.digits_mode is DigitsMode.DETERMINISTIC_HASH
    (True, True)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import IdConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_IRI = "https://example.com/ids"
DEFAULT_DOCUMENT_ID_SEED = 64879470


class IdScheme(str, Enum):
    """Identifier schemes a provider can be built for."""

    EXAMPLE_IRI = "example_iri"
    UUID_URN = "uuid_urn"


class DigitsMode(str, Enum):
    """How IRI asset/submodel digit bodies are produced."""

    DETERMINISTIC_HASH = "deterministic_hash"
    RANDOM_SECURE = "random_secure"


_SCHEME_ALIASES = {
    "exampleiri": IdScheme.EXAMPLE_IRI,
    "iri": IdScheme.EXAMPLE_IRI,
    "uuidurn": IdScheme.UUID_URN,
    "uuid": IdScheme.UUID_URN,
    "urn": IdScheme.UUID_URN,
}

_DIGITS_ALIASES = {
    "deterministichash": DigitsMode.DETERMINISTIC_HASH,
    "deterministic": DigitsMode.DETERMINISTIC_HASH,
    "hash": DigitsMode.DETERMINISTIC_HASH,
    "randomsecure": DigitsMode.RANDOM_SECURE,
    "random": DigitsMode.RANDOM_SECURE,
    "secure": DigitsMode.RANDOM_SECURE,
}

# Keys used by the external settings layer.
_SETTINGS_KEYS = {
    "IdScheme": "id_scheme",
    "ExampleIriDigitsMode": "digits_mode",
    "BaseIri": "base_iri",
    "MaxAttempts": "max_attempts",
    "DocumentIdSeed": "document_id_seed",
}


def _token(value: str) -> str:
    return "".join(ch for ch in value.strip().lower() if ch not in "_- ")


def _by_ordinal(enum_cls: Any, value: Any) -> Any:
    # Saved settings store enum members by their declaration index.
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        if not value.strip().isdecimal():
            return None
        value = int(value.strip())
    if not isinstance(value, int):
        return None
    members = list(enum_cls)
    return members[value] if 0 <= value < len(members) else None


def parse_id_scheme(value: Union[str, int, IdScheme, None]) -> IdScheme:
    """Resolve a scheme selector; anything unrecognized falls back to IRI-style.

    Example:
        >>> parse_id_scheme("urn"), parse_id_scheme("carrier-pigeon")
        (<IdScheme.UUID_URN: 'uuid_urn'>, <IdScheme.EXAMPLE_IRI: 'example_iri'>)
        >>> parse_id_scheme(1)
        <IdScheme.UUID_URN: 'uuid_urn'>
    """
    if isinstance(value, IdScheme):
        return value
    if value is None:
        return IdScheme.EXAMPLE_IRI
    resolved = _by_ordinal(IdScheme, value) or _SCHEME_ALIASES.get(_token(str(value)))
    if resolved is None:
        logger.warning("Unrecognized id scheme %r; falling back to %s", value, IdScheme.EXAMPLE_IRI.value)
        return IdScheme.EXAMPLE_IRI
    return resolved


def parse_digits_mode(value: Union[str, int, DigitsMode, None]) -> DigitsMode:
    """Resolve a digits mode selector.

    An absent mode means deterministic hashing. Integers select a member by
    declaration index, as the settings store saves them. Unrecognized values raise
    :class:`IdConfigurationError`.
    """
    if isinstance(value, DigitsMode):
        return value
    if value is None:
        return DigitsMode.DETERMINISTIC_HASH
    resolved = _by_ordinal(DigitsMode, value) or _DIGITS_ALIASES.get(_token(str(value)))
    if resolved is None:
        raise IdConfigurationError(
            f"Unknown digits mode '{value}'. Expected one of: "
            + ", ".join(mode.value for mode in DigitsMode)
            + ".",
            field="digits_mode",
            value=value,
        )
    return resolved


class IdOptions(BaseModel):
    """Inbound identifier configuration for one conversion run.

    Parameters:
        id_scheme: Which provider the factory builds.
        digits_mode: Digit body policy for IRI asset/submodel identifiers.
        base_iri: Base address for IRI identifiers; only used by the IRI scheme.
        max_attempts: Optional bound on the collision probe. ``None`` keeps it unbounded.
        document_id_seed: First value handed out by the document id generator.
    """

    model_config = ConfigDict(frozen=True)

    id_scheme: IdScheme = IdScheme.EXAMPLE_IRI
    digits_mode: DigitsMode = DigitsMode.DETERMINISTIC_HASH
    base_iri: str = DEFAULT_BASE_IRI
    max_attempts: Optional[int] = Field(default=None, ge=1)
    document_id_seed: int = Field(default=DEFAULT_DOCUMENT_ID_SEED, ge=0)

    @field_validator("id_scheme", mode="before")
    @classmethod
    def _coerce_scheme(cls, value: Any) -> IdScheme:
        return parse_id_scheme(value)

    @field_validator("digits_mode", mode="before")
    @classmethod
    def _coerce_digits_mode(cls, value: Any) -> DigitsMode:
        return parse_digits_mode(value)

    @field_validator("base_iri", mode="before")
    @classmethod
    def _coerce_base_iri(cls, value: Any) -> str:
        return "" if value is None else value

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "IdOptions":
        """Build options from a loose settings mapping.

        Accepts either field names or the external settings keys
        (``IdScheme``, ``ExampleIriDigitsMode``, ``BaseIri``, ...); unknown keys
        are ignored.

        Example:
            >>> IdOptions.from_mapping({"IdScheme": "UuidUrn"}).id_scheme.value
            'uuid_urn'
        """
        values: dict[str, Any] = {}
        for key, value in settings.items():
            name = _SETTINGS_KEYS.get(key, key)
            if name in cls.model_fields:
                values[name] = value
        try:
            return cls(**values)
        except ValidationError as exc:
            first = exc.errors()[0]
            field_name = str(first["loc"][0]) if first.get("loc") else None
            raise IdConfigurationError(
                f"Invalid identifier settings: {first['msg']}",
                field=field_name,
                value=values.get(field_name) if field_name else None,
            ) from exc
