"""API group and version identifiers for the policy resources."""

from __future__ import annotations

from dataclasses import dataclass

POLICY_GROUP = "policy.open-cluster-management.io"


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def with_resource(self, resource: str) -> GroupVersionResource:
        """Return the resource of this group and version with the given name."""
        return GroupVersionResource(self.group, self.version, resource)


@dataclass(frozen=True)
class GroupVersionResource:
    """A resource name qualified by its API group and version."""

    group: str
    version: str
    resource: str

    def group_version(self) -> GroupVersion:
        """Return the group and version this resource belongs to."""
        return GroupVersion(self.group, self.version)


V1 = GroupVersion(POLICY_GROUP, "v1")
V1BETA1 = GroupVersion(POLICY_GROUP, "v1beta1")