"""Catalog facade: a product catalog served from a local in-memory store
and from a remote gRPC catalog service."""

__version__ = "0.1.0"
