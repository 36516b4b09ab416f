"""Explicit redundancy strategy of a pool."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from poolguard.models.pool import ErasureCodedSpec, PoolSpec, ReplicatedSpec


class ReplicatedStrategy(BaseModel):
    """Pool protected by whole-object copies."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["replicated"] = "replicated"
    spec: ReplicatedSpec


class ErasureCodedStrategy(BaseModel):
    """Pool protected by data and coding chunks."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["erasurecoded"] = "erasurecoded"
    spec: ErasureCodedSpec


class UnsetStrategy(BaseModel):
    """No redundancy fields are set."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unset"] = "unset"


RedundancyStrategy = Annotated[
    Union[ReplicatedStrategy, ErasureCodedStrategy, UnsetStrategy],
    Field(discriminator="kind"),
]


def classify_strategy(spec: PoolSpec) -> RedundancyStrategy:
    """Map the zero-valued fields of a spec onto an explicit strategy.

    Replication wins when both are partially set; callers that need to reject
    that case must run validate_pool_spec first.
    """
    if spec.replication_configured():
        return ReplicatedStrategy(spec=spec.replicated)
    if spec.is_erasure_coded():
        return ErasureCodedStrategy(spec=spec.erasure_coded)
    return UnsetStrategy()
