"""Admission validation for CephBlockPool resources."""

import logging
from typing import Union

from poolguard.core.config import Settings, get_settings
from poolguard.core.exceptions import (
    BothStrategiesConfiguredError,
    CodingChunksTooLowError,
    DataChunksTooLowError,
    ImmutableNameChangedError,
    NoStrategyConfiguredError,
    PoolValidationError,
    ReservedPoolErasureCodedError,
    StrategyChangeForbiddenError,
)
from poolguard.core.logging import AuditLogger
from poolguard.models.blockpool import CephBlockPool
from poolguard.models.pool import NamedPoolSpec
from poolguard.models.strategy import ErasureCodedStrategy, RedundancyStrategy, ReplicatedStrategy

logger = logging.getLogger(__name__)


def validate_pool_spec(
    ps: NamedPoolSpec,
    settings: Union[Settings, None] = None,
) -> RedundancyStrategy:
    """Validate any named pool spec.

    Rules are evaluated in a fixed order and the first violation is raised.

    Args:
        ps: Pool spec with its resolved name
        settings: Settings providing the chunk minimums (defaults to cached settings)

    Returns:
        The redundancy strategy the spec configures

    Raises:
        NoStrategyConfiguredError: If neither strategy is set
        BothStrategiesConfiguredError: If both strategies are set
        DataChunksTooLowError: If dataChunks is set below the minimum
        CodingChunksTooLowError: If codingChunks is set below the minimum
    """
    settings = settings or get_settings()
    ec = ps.spec.erasure_coded
    rep = ps.spec.replicated

    if ec.coding_chunks <= 0 and ec.data_chunks <= 0 and rep.target_size_ratio <= 0 and rep.size <= 0:
        raise NoStrategyConfiguredError(details={"pool": ps.name})

    if ps.spec.erasure_coded_fields_set() and ps.spec.replication_configured():
        raise BothStrategiesConfiguredError(details={"pool": ps.name})

    if rep.size == 0 and rep.target_size_ratio == 0:
        if 0 < ec.data_chunks < settings.min_data_chunks:
            raise DataChunksTooLowError(ec.data_chunks, settings.min_data_chunks, details={"pool": ps.name})

        # Only reachable when min_coding_chunks is raised above 1.
        if 0 < ec.coding_chunks < settings.min_coding_chunks:
            raise CodingChunksTooLowError(ec.coding_chunks, settings.min_coding_chunks, details={"pool": ps.name})

        return ErasureCodedStrategy(spec=ec)

    return ReplicatedStrategy(spec=rep)


class PoolSpecValidator:
    """Validates CephBlockPool create, update and delete requests."""

    def __init__(
        self,
        settings: Union[Settings, None] = None,
        log: Union[logging.Logger, None] = None,
        audit: Union[AuditLogger, None] = None,
    ) -> None:
        """Initialize the validator.

        Args:
            settings: Validation settings (defaults to cached settings)
            log: Logger to report requests to (defaults to the module logger)
            audit: Optional audit logger receiving one entry per decision
        """
        self.settings = settings or get_settings()
        self.log = log or logger
        self.audit = audit

    def validate_ceph_block_pool(self, pool: CephBlockPool) -> RedundancyStrategy:
        """Validate a CephBlockPool spec, built-in pool names included.

        Args:
            pool: Resource to validate

        Returns:
            The redundancy strategy the spec configures

        Raises:
            PoolValidationError: If the spec is invalid
        """
        named = pool.to_named_pool_spec()
        if named.name in self.settings.reserved_pool_names and named.spec.is_erasure_coded():
            raise ReservedPoolErasureCodedError(named.name)

        return validate_pool_spec(named, self.settings)

    def validate_create(self, pool: CephBlockPool) -> None:
        """Validate a new CephBlockPool.

        Raises:
            PoolValidationError: If the pool is rejected
        """
        self.log.info(f"validate create cephblockpool {pool.resource_id()}")
        try:
            strategy = self.validate_ceph_block_pool(pool)
        except PoolValidationError as e:
            self._record("CREATE", pool, e)
            raise
        self._record("CREATE", pool, None, {"strategy": strategy.kind})

    def validate_update(self, pool: CephBlockPool, old: CephBlockPool) -> None:
        """Validate a change from old to pool.

        Args:
            pool: Incoming object
            old: Previously stored object

        Raises:
            PoolValidationError: If the update is rejected
        """
        self.log.info(f"validate update cephblockpool {pool.resource_id()}")
        try:
            strategy = self.validate_ceph_block_pool(pool)
            self._check_transition(pool, old)
        except PoolValidationError as e:
            self._record("UPDATE", pool, e)
            raise
        self._record("UPDATE", pool, None, {"strategy": strategy.kind})

    def validate_delete(self, pool: CephBlockPool) -> None:
        """Validate a CephBlockPool deletion. Deletions are always accepted."""
        self.log.info(f"validate delete cephblockpool {pool.resource_id()}")
        self._record("DELETE", pool, None)

    def _check_transition(self, pool: CephBlockPool, old: CephBlockPool) -> None:
        old_name = old.pool_name()
        new_name = pool.pool_name()
        if old_name != new_name:
            raise ImmutableNameChangedError(old_name, new_name)

        if pool.spec.erasure_coded_fields_set() and old.spec.replication_configured():
            raise StrategyChangeForbiddenError(previous="replicated", requested="erasurecoded")

        if pool.spec.replication_configured() and old.spec.erasure_coded_fields_set():
            raise StrategyChangeForbiddenError(previous="erasurecoded", requested="replicated")

    def _record(
        self,
        operation: str,
        pool: CephBlockPool,
        error: Union[PoolValidationError, None],
        details: Union[dict, None] = None,
    ) -> None:
        if error is not None:
            self.log.warning(f"rejected {operation.lower()} of {pool.resource_id()}: {error.message}")
        if self.audit is None:
            return
        if error is None:
            self.audit.log_decision(operation, pool.resource_id(), "ACCEPTED", details)
        else:
            self.audit.log_decision(
                operation,
                pool.resource_id(),
                "REJECTED",
                {"code": error.code, "message": error.message, **error.details},
            )
