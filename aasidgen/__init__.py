"""aasidgen package exports."""

from .digest import group_digits, random_digits, sha256_digest, take_decimal_digits, take_hex
from .documents import DocumentIdGenerator
from .errors import IdConfigurationError, IdGenerationError, IdSpaceExhaustedError
from .factory import create_id_provider
from .idshort import normalize_id_short
from .ledger import AllocationLedger
from .options import DigitsMode, IdOptions, IdScheme, parse_digits_mode, parse_id_scheme
from .providers import ExampleIriIdProvider, IdProvider, UuidUrnIdProvider

__all__ = [
    "AllocationLedger",
    "DigitsMode",
    "DocumentIdGenerator",
    "ExampleIriIdProvider",
    "IdConfigurationError",
    "IdGenerationError",
    "IdOptions",
    "IdProvider",
    "IdScheme",
    "IdSpaceExhaustedError",
    "UuidUrnIdProvider",
    "create_id_provider",
    "group_digits",
    "normalize_id_short",
    "parse_digits_mode",
    "parse_id_scheme",
    "random_digits",
    "sha256_digest",
    "take_decimal_digits",
    "take_hex",
]
