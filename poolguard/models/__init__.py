"""Pydantic models for CephBlockPool admission."""

from poolguard.models.blockpool import (
    CephBlockPool,
    CephBlockPoolStatus,
    Condition,
    NamedBlockPoolSpec,
    ObjectMeta,
)
from poolguard.models.pool import (
    ErasureCodedSpec,
    HybridStorageSpec,
    MirroringSpec,
    NamedPoolSpec,
    PoolSpec,
    QuotaSpec,
    ReplicatedSpec,
    SnapshotScheduleSpec,
)
from poolguard.models.strategy import (
    ErasureCodedStrategy,
    RedundancyStrategy,
    ReplicatedStrategy,
    UnsetStrategy,
    classify_strategy,
)

__all__ = [
    "CephBlockPool",
    "CephBlockPoolStatus",
    "Condition",
    "ErasureCodedSpec",
    "ErasureCodedStrategy",
    "HybridStorageSpec",
    "MirroringSpec",
    "NamedBlockPoolSpec",
    "NamedPoolSpec",
    "ObjectMeta",
    "PoolSpec",
    "QuotaSpec",
    "RedundancyStrategy",
    "ReplicatedSpec",
    "ReplicatedStrategy",
    "SnapshotScheduleSpec",
    "UnsetStrategy",
    "classify_strategy",
]
