"""Pydantic models for Ceph pool specifications."""

from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field


class HybridStorageSpec(BaseModel):
    """Device classes for a hybrid (primary/secondary) replicated pool."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    primary_device_class: str = Field(..., alias="primaryDeviceClass", description="Device class for the primary OSD")
    secondary_device_class: str = Field(
        ...,
        alias="secondaryDeviceClass",
        description="Device class for the remaining replicas",
    )


class ReplicatedSpec(BaseModel):
    """Replication settings of a pool."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    size: int = Field(default=0, ge=0, description="Number of copies (0 = unset)")
    target_size_ratio: float = Field(
        default=0,
        ge=0,
        alias="targetSizeRatio",
        description="Expected share of cluster capacity (0 = unset)",
    )
    require_safe_replica_size: bool = Field(default=False, alias="requireSafeReplicaSize")
    replicas_per_failure_domain: int = Field(default=0, ge=0, alias="replicasPerFailureDomain")
    sub_failure_domain: str = Field(default="", alias="subFailureDomain")
    hybrid_storage: Union[HybridStorageSpec, None] = Field(default=None, alias="hybridStorage")

    def is_target_ratio_enabled(self) -> bool:
        """Return True if a target size ratio is set."""
        return self.target_size_ratio != 0


class ErasureCodedSpec(BaseModel):
    """Erasure coding settings of a pool."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    data_chunks: int = Field(default=0, ge=0, alias="dataChunks", description="Number of data chunks (k)")
    coding_chunks: int = Field(default=0, ge=0, alias="codingChunks", description="Number of coding chunks (m)")
    algorithm: str = Field(default="", description="Erasure code plugin, e.g. jerasure")


class SnapshotScheduleSpec(BaseModel):
    """An RBD mirroring snapshot schedule."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    interval: str = ""
    start_time: str = Field(default="", alias="startTime")
    path: str = ""


class MirroringSpec(BaseModel):
    """RBD mirroring settings of a pool."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    enabled: bool = False
    mode: str = ""
    snapshot_schedules: List[SnapshotScheduleSpec] = Field(default_factory=list, alias="snapshotSchedules")

    def snapshot_schedules_enabled(self) -> bool:
        """Return True if any snapshot schedule is configured."""
        return len(self.snapshot_schedules) > 0


class QuotaSpec(BaseModel):
    """Pool quotas."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    max_bytes: Union[int, None] = Field(default=None, ge=0, alias="maxBytes")
    max_size: Union[str, None] = Field(default=None, alias="maxSize")
    max_objects: Union[int, None] = Field(default=None, ge=0, alias="maxObjects")


class PoolSpec(BaseModel):
    """Redundancy and placement settings of a Ceph pool."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    failure_domain: str = Field(default="", alias="failureDomain")
    crush_root: str = Field(default="", alias="crushRoot")
    device_class: str = Field(default="", alias="deviceClass")
    enable_rbd_stats: bool = Field(default=False, alias="enableRBDStats")
    compression_mode: str = Field(default="", alias="compressionMode", description="Empty means disabled")
    parameters: Dict[str, str] = Field(default_factory=dict)
    replicated: ReplicatedSpec = Field(default_factory=ReplicatedSpec)
    erasure_coded: ErasureCodedSpec = Field(default_factory=ErasureCodedSpec, alias="erasureCoded")
    mirroring: MirroringSpec = Field(default_factory=MirroringSpec)
    quotas: QuotaSpec = Field(default_factory=QuotaSpec)

    def is_replicated(self) -> bool:
        return self.replicated.size > 0

    def is_erasure_coded(self) -> bool:
        return self.erasure_coded.coding_chunks > 0 or self.erasure_coded.data_chunks > 0

    def is_hybrid_storage_pool(self) -> bool:
        return self.replicated.hybrid_storage is not None

    def is_compression_enabled(self) -> bool:
        return self.compression_mode != ""

    def replication_configured(self) -> bool:
        """Return True if size or target size ratio is set."""
        return self.replicated.size > 0 or self.replicated.target_size_ratio > 0

    def erasure_coded_fields_set(self) -> bool:
        """Return True if any erasure coded field, algorithm included, is set."""
        return self.is_erasure_coded() or self.erasure_coded.algorithm != ""


class NamedPoolSpec(BaseModel):
    """A pool spec together with the resolved pool name."""

    model_config = ConfigDict(frozen=True)

    name: str
    spec: PoolSpec
