import pytest

from configpolicy.groupversion import (
    POLICY_GROUP,
    V1,
    V1BETA1,
    GroupVersion,
    GroupVersionResource,
)


def test_v1_string():
    version = GroupVersion(POLICY_GROUP, "v1")
    assert str(version) == "policy.open-cluster-management.io/v1"
    assert version == V1


def test_v1beta1_string():
    version = GroupVersion(POLICY_GROUP, "v1beta1")
    assert str(version) == "policy.open-cluster-management.io/v1beta1"
    assert version == V1BETA1


def test_empty_group_is_version_only():
    assert str(GroupVersion("", "v1")) == "v1"


def test_with_resource_round_trip():
    resource = V1.with_resource("ConfigurationPolicy")
    assert resource == GroupVersionResource(POLICY_GROUP, "v1", "ConfigurationPolicy")
    assert resource.group_version() == V1
    assert str(resource.group_version()) == str(V1)


def test_frozen():
    version = GroupVersion(POLICY_GROUP, "v1")
    with pytest.raises(AttributeError):
        version.version = "v2"  # type: ignore[misc]
    assert str(version) == "policy.open-cluster-management.io/v1"