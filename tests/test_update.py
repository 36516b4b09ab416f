"""Tests for CephBlockPool update validation."""

from typing import Any, Dict

import pytest

from poolguard.core.config import Settings
from poolguard.core.exceptions import (
    DataChunksTooLowError,
    ImmutableNameChangedError,
    StrategyChangeForbiddenError,
)
from poolguard.models import CephBlockPool
from poolguard.validation import PoolSpecValidator

REPLICATED = {"replicated": {"size": 3}}
ERASURE_CODED = {"erasureCoded": {"dataChunks": 4, "codingChunks": 2}}


def make_pool(spec: Dict[str, Any], resource_name: str = "blockpool") -> CephBlockPool:
    return CephBlockPool.model_validate({"metadata": {"name": resource_name, "namespace": "rook-ceph"}, "spec": spec})


@pytest.fixture
def validator() -> PoolSpecValidator:
    return PoolSpecValidator(settings=Settings())


class TestValidateUpdate:
    """Tests for PoolSpecValidator.validate_update."""

    def test_unchanged_replicated(self, validator: PoolSpecValidator) -> None:
        """Test that resizing a replicated pool is accepted."""
        old = make_pool({"name": "pool1", **REPLICATED})
        new = make_pool({"name": "pool1", "replicated": {"size": 2, "targetSizeRatio": 0.2}})

        assert validator.validate_update(new, old) is None

    def test_unchanged_erasure_coded(self, validator: PoolSpecValidator) -> None:
        """Test that an erasure coded pool can be updated in place."""
        old = make_pool({"name": "ecpool", **ERASURE_CODED})
        new = make_pool({"name": "ecpool", "compressionMode": "passive", **ERASURE_CODED})

        assert validator.validate_update(new, old) is None

    def test_new_spec_revalidated(self, validator: PoolSpecValidator) -> None:
        """Test that the incoming spec is fully validated."""
        old = make_pool({"name": "ecpool", **ERASURE_CODED})
        new = make_pool({"name": "ecpool", "erasureCoded": {"dataChunks": 1, "codingChunks": 2}})

        with pytest.raises(DataChunksTooLowError):
            validator.validate_update(new, old)

    def test_rename_rejected(self, validator: PoolSpecValidator) -> None:
        """Test that the pool name cannot change."""
        old = make_pool({"name": "pool1", **REPLICATED})
        new = make_pool({"name": "pool2", **REPLICATED})

        with pytest.raises(ImmutableNameChangedError) as exc_info:
            validator.validate_update(new, old)

        assert exc_info.value.message == "invalid update: pool name cannot be changed"
        assert exc_info.value.details == {"old_name": "pool1", "new_name": "pool2"}

    def test_rename_via_resource_name_rejected(self, validator: PoolSpecValidator) -> None:
        """Test that the resolved name is compared when no override is set."""
        old = make_pool(REPLICATED, resource_name="pool1")
        new = make_pool(REPLICATED, resource_name="pool2")

        with pytest.raises(ImmutableNameChangedError):
            validator.validate_update(new, old)

    def test_override_matching_resource_name_accepted(self, validator: PoolSpecValidator) -> None:
        """Test that spelling out the resolved name is not a rename."""
        old = make_pool(REPLICATED, resource_name="pool1")
        new = make_pool({"name": "pool1", **REPLICATED}, resource_name="pool1")

        assert validator.validate_update(new, old) is None

    def test_replicated_to_erasure_coded_rejected(self, validator: PoolSpecValidator) -> None:
        """Test that a replicated pool cannot become erasure coded."""
        old = make_pool({"name": "pool1", **REPLICATED})
        new = make_pool({"name": "pool1", **ERASURE_CODED})

        with pytest.raises(StrategyChangeForbiddenError) as exc_info:
            validator.validate_update(new, old)

        assert exc_info.value.code == "STRATEGY_CHANGE_FORBIDDEN"
        assert exc_info.value.details["previous"] == "replicated"
        assert exc_info.value.details["requested"] == "erasurecoded"

    def test_target_ratio_to_erasure_coded_rejected(self, validator: PoolSpecValidator) -> None:
        """Test that a target size ratio counts as previous replication."""
        old = make_pool({"name": "pool1", "replicated": {"targetSizeRatio": 0.5}})
        new = make_pool({"name": "pool1", **ERASURE_CODED})

        with pytest.raises(StrategyChangeForbiddenError):
            validator.validate_update(new, old)

    def test_erasure_coded_to_replicated_rejected(self, validator: PoolSpecValidator) -> None:
        """Test that an erasure coded pool cannot become replicated."""
        old = make_pool({"name": "ecpool", **ERASURE_CODED})
        new = make_pool({"name": "ecpool", **REPLICATED})

        with pytest.raises(StrategyChangeForbiddenError) as exc_info:
            validator.validate_update(new, old)

        assert exc_info.value.details["previous"] == "erasurecoded"
        assert exc_info.value.details["requested"] == "replicated"

    def test_previous_algorithm_counts_as_erasure_coded(self, validator: PoolSpecValidator) -> None:
        """Test that an algorithm on the stored object blocks switching to replication."""
        old = make_pool({"name": "pool1", "erasureCoded": {"algorithm": "jerasure"}})
        new = make_pool({"name": "pool1", **REPLICATED})

        with pytest.raises(StrategyChangeForbiddenError):
            validator.validate_update(new, old)

    def test_name_checked_before_strategy(self, validator: PoolSpecValidator) -> None:
        """Test that a rename is reported before a strategy switch."""
        old = make_pool({"name": "pool1", **REPLICATED})
        new = make_pool({"name": "pool2", **ERASURE_CODED})

        with pytest.raises(ImmutableNameChangedError):
            validator.validate_update(new, old)
