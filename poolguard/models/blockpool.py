"""Pydantic models for the CephBlockPool resource."""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from poolguard.models.pool import NamedPoolSpec, PoolSpec


class ObjectMeta(BaseModel):
    """Subset of Kubernetes object metadata used for admission."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Resource name")
    namespace: str = Field(default="", description="Resource namespace")


class NamedBlockPoolSpec(PoolSpec):
    """Block pool spec with an optional pool name override."""

    name: str = Field(default="", description="Ceph pool name (defaults to the resource name)")


class Condition(BaseModel):
    """Status condition of a CephBlockPool."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    status: str
    reason: str = ""
    message: str = ""
    last_heartbeat_time: Union[str, None] = Field(default=None, alias="lastHeartbeatTime")
    last_transition_time: Union[str, None] = Field(default=None, alias="lastTransitionTime")


class CephBlockPoolStatus(BaseModel):
    """Observed state of a CephBlockPool."""

    phase: str = ""
    conditions: List[Condition] = Field(default_factory=list)


class CephBlockPool(BaseModel):
    """A CephBlockPool custom resource."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_version: str = Field(default="ceph.rook.io/v1", alias="apiVersion")
    kind: str = "CephBlockPool"
    metadata: ObjectMeta
    spec: NamedBlockPoolSpec = Field(default_factory=NamedBlockPoolSpec)
    status: Union[CephBlockPoolStatus, None] = None

    @property
    def name(self) -> str:
        """Return the resource name."""
        return self.metadata.name

    def resource_id(self) -> str:
        """Return an identifier such as cephblockpool:rook-ceph/replicapool."""
        if self.metadata.namespace:
            return f"cephblockpool:{self.metadata.namespace}/{self.metadata.name}"
        return f"cephblockpool:{self.metadata.name}"

    def pool_name(self) -> str:
        """Return spec.name if set, otherwise the resource name."""
        return self.spec.name or self.metadata.name

    def to_named_pool_spec(self) -> NamedPoolSpec:
        """Return the spec with the resolved pool name."""
        pool_fields = self.spec.model_dump(exclude={"name"})
        return NamedPoolSpec(name=self.pool_name(), spec=PoolSpec.model_validate(pool_fields))

    def get_status_conditions(self) -> List[Condition]:
        """Return the status condition list, creating an empty status if needed."""
        if self.status is None:
            self.status = CephBlockPoolStatus()
        return self.status.conditions
