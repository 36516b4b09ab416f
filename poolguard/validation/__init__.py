"""CephBlockPool admission validation."""

from poolguard.validation.validator import PoolSpecValidator, validate_pool_spec

__all__ = [
    "PoolSpecValidator",
    "validate_pool_spec",
]
