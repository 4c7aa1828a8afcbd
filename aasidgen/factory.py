"""Provider selection from identifier configuration."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .options import DEFAULT_BASE_IRI, DigitsMode, IdOptions, IdScheme, parse_digits_mode, parse_id_scheme
from .providers import ExampleIriIdProvider, IdProvider, UuidUrnIdProvider

logger = logging.getLogger(__name__)


def create_id_provider(
    options: Optional[IdOptions] = None,
    *,
    scheme: Union[IdScheme, str, None] = None,
    base_iri: Optional[str] = None,
    digits_mode: Union[DigitsMode, str, None] = None,
    max_attempts: Optional[int] = None,
) -> IdProvider:
    """Build the provider matching ``options`` or the keyword selectors.

    Keyword arguments override the corresponding ``options`` fields. Any
    scheme other than UUID/URN yields the IRI-style provider.

    Example:
        >>> create_id_provider(scheme="uuid_urn").scheme
        'uuid_urn'
        >>> create_id_provider().scheme
        'example_iri'
    """
    options = options or IdOptions()
    resolved_scheme = parse_id_scheme(scheme) if scheme is not None else options.id_scheme
    attempts = max_attempts if max_attempts is not None else options.max_attempts

    if resolved_scheme is IdScheme.UUID_URN:
        logger.debug("Creating UUID/URN id provider")
        return UuidUrnIdProvider(max_attempts=attempts)

    resolved_base = base_iri if base_iri is not None else options.base_iri
    resolved_mode = parse_digits_mode(digits_mode) if digits_mode is not None else options.digits_mode
    logger.debug(
        "Creating IRI id provider base=%s digits_mode=%s",
        resolved_base or DEFAULT_BASE_IRI,
        resolved_mode.value,
    )
    return ExampleIriIdProvider(resolved_base, resolved_mode, max_attempts=attempts)
