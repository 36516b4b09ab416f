"""Exception classes for pool admission rejections."""

from typing import Any, Dict, Union


class PoolValidationError(Exception):
    """Base exception for all pool admission rejections."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Union[Dict[str, Any], None] = None,
    ) -> None:
        """Initialize exception with rejection details.

        Args:
            message: Human-readable rejection reason
            code: Error code identifier
            status_code: HTTP status code the admission boundary may use
            details: Additional error details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = dict(details or {})
        super().__init__(message)


class ReservedPoolErasureCodedError(PoolValidationError):
    """Raised when a ceph built-in pool requests erasure coding."""

    def __init__(self, name: str, details: Union[Dict[str, Any], None] = None) -> None:
        """Initialize with the reserved pool name."""
        error_details = dict(details or {})
        error_details["name"] = name
        super().__init__(
            message=f"invalid CephBlockPool spec: ceph built-in pool '{name}' cannot be erasure coded",
            code="RESERVED_POOL_ERASURE_CODED",
            details=error_details,
        )


class NoStrategyConfiguredError(PoolValidationError):
    """Raised when neither replicated nor erasure coded fields are set."""

    def __init__(self, details: Union[Dict[str, Any], None] = None) -> None:
        """Initialize with default message."""
        super().__init__(
            message="invalid pool spec: either of erasurecoded or replicated fields should be set",
            code="NO_STRATEGY_CONFIGURED",
            details=details,
        )


class BothStrategiesConfiguredError(PoolValidationError):
    """Raised when replicated and erasure coded fields are set together."""

    def __init__(self, details: Union[Dict[str, Any], None] = None) -> None:
        """Initialize with default message."""
        super().__init__(
            message="invalid pool spec: both erasurecoded and replicated fields cannot be set at the same time",
            code="BOTH_STRATEGIES_CONFIGURED",
            details=details,
        )


class DataChunksTooLowError(PoolValidationError):
    """Raised when erasurecoded.dataChunks is set below the minimum."""

    def __init__(
        self,
        data_chunks: int,
        minimum: int = 2,
        details: Union[Dict[str, Any], None] = None,
    ) -> None:
        """Initialize with the offending value and the minimum."""
        error_details = dict(details or {})
        error_details.update({"data_chunks": data_chunks, "minimum": minimum})
        super().__init__(
            message=f"invalid pool spec: erasurecoded.datachunks needs minimum value of {minimum}",
            code="DATA_CHUNKS_TOO_LOW",
            details=error_details,
        )


class CodingChunksTooLowError(PoolValidationError):
    """Raised when erasurecoded.codingChunks is set below the minimum."""

    def __init__(
        self,
        coding_chunks: int,
        minimum: int = 1,
        details: Union[Dict[str, Any], None] = None,
    ) -> None:
        """Initialize with the offending value and the minimum."""
        error_details = dict(details or {})
        error_details.update({"coding_chunks": coding_chunks, "minimum": minimum})
        super().__init__(
            message=f"invalid pool spec: erasurecoded.codingchunks needs minimum value of {minimum}",
            code="CODING_CHUNKS_TOO_LOW",
            details=error_details,
        )


class ImmutableNameChangedError(PoolValidationError):
    """Raised when an update tries to rename the pool."""

    def __init__(
        self,
        old_name: str,
        new_name: str,
        details: Union[Dict[str, Any], None] = None,
    ) -> None:
        """Initialize with the previous and requested names."""
        error_details = dict(details or {})
        error_details.update({"old_name": old_name, "new_name": new_name})
        super().__init__(
            message="invalid update: pool name cannot be changed",
            code="IMMUTABLE_NAME_CHANGED",
            details=error_details,
        )


class StrategyChangeForbiddenError(PoolValidationError):
    """Raised when an update switches between replicated and erasure coded."""

    def __init__(
        self,
        previous: str,
        requested: str,
        details: Union[Dict[str, Any], None] = None,
    ) -> None:
        """Initialize with the previous and requested strategy kinds.

        Args:
            previous: Strategy field set on the stored object
            requested: Strategy field set on the incoming object
            details: Additional error details
        """
        error_details = dict(details or {})
        error_details.update({"previous": previous, "requested": requested})
        super().__init__(
            message=(
                f"invalid update: {previous} field is set already in previous object. "
                f"cannot be changed to use {requested}"
            ),
            code="STRATEGY_CHANGE_FORBIDDEN",
            details=error_details,
        )
