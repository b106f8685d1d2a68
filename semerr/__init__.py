"""Semantic exception types mapped to gRPC codes and HTTP statuses."""

__version__ = "0.1.0"
__all__ = ["kinds", "mapping"]