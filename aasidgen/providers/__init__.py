"""Identifier provider implementations."""

from .base import IdProvider
from .example_iri import ExampleIriIdProvider
from .uuid_urn import UuidUrnIdProvider

__all__ = ["IdProvider", "ExampleIriIdProvider", "UuidUrnIdProvider"]
