"""Types of the v1beta1 OperatorPolicy API."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .groupversion import V1BETA1
from .v1 import (
    ComplianceState,
    ComplianceType,
    LabelSelectorRequirement,
    RelatedObject,
    RemediationAction,
    Severity,
)

KIND = "OperatorPolicy"
LIST_KIND = "OperatorPolicyList"


class StatusConfigAction(str, enum.Enum):
    """How a resource status affects the policy."""

    STATUS_MESSAGE_ONLY = "StatusMessageOnly"
    NON_COMPLIANT = "NonCompliant"

    def __str__(self) -> str:
        return self.value


class RemovalAction(str, enum.Enum):
    """What the controller may do with a resource when the policy is removed."""

    KEEP = "Keep"
    DELETE = "Delete"
    DELETE_IF_UNUSED = "DeleteIfUnused"

    def __str__(self) -> str:
        return self.value


def _optional(enum_cls, value):
    return enum_cls(value) if value else None


def _put_enum(out: Dict[str, Any], key: str, value: Optional[enum.Enum]) -> None:
    if value is not None:
        out[key] = value.value


@dataclass
class LabelSelector:
    """Selects objects by their labels."""

    match_labels: Dict[str, str] = field(default_factory=dict)
    match_expressions: List[LabelSelectorRequirement] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> LabelSelector:
        return cls(
            match_labels=dict(data.get("matchLabels") or {}),
            match_expressions=[LabelSelectorRequirement.from_dict(e) for e in data.get("matchExpressions") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.match_labels:
            out["matchLabels"] = dict(self.match_labels)
        if self.match_expressions:
            out["matchExpressions"] = [e.to_dict() for e in self.match_expressions]
        return out


@dataclass
class TargetNsOrSelector:
    """Target namespaces given either by name or by a label selector."""

    namespaces: List[str] = field(default_factory=list)
    selector: Optional[LabelSelector] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TargetNsOrSelector:
        selector = data.get("selector")
        return cls(
            namespaces=list(data.get("namespaces") or []),
            selector=LabelSelector.from_dict(selector) if selector is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.namespaces:
            out["namespaces"] = list(self.namespaces)
        if self.selector is not None:
            out["selector"] = self.selector.to_dict()
        return out


@dataclass
class OperatorGroup:
    """An OLM OperatorGroup specification."""

    name: str = ""
    namespace: str = ""
    target: TargetNsOrSelector = field(default_factory=TargetNsOrSelector)
    service_account_name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OperatorGroup:
        return cls(
            name=data.get("name", ""),
            namespace=data.get("namespace", ""),
            target=TargetNsOrSelector.from_dict(data.get("target") or {}),
            service_account_name=data.get("serviceAccountName", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.namespace:
            out["namespace"] = self.namespace
        out["target"] = self.target.to_dict()
        if self.service_account_name:
            out["serviceAccountName"] = self.service_account_name
        return out


@dataclass
class SubscriptionSpec:
    """An OLM subscription specification extended with a namespace."""

    name: str = ""
    source: str = ""
    source_namespace: str = ""
    channel: str = ""
    starting_csv: str = ""
    install_plan_approval: str = ""
    config: Optional[Dict[str, Any]] = None
    namespace: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SubscriptionSpec:
        config = data.get("config")
        return cls(
            name=data.get("name", ""),
            source=data.get("source", ""),
            source_namespace=data.get("sourceNamespace", ""),
            channel=data.get("channel", ""),
            starting_csv=data.get("startingCSV", ""),
            install_plan_approval=data.get("installPlanApproval", ""),
            config=copy.deepcopy(config) if config is not None else None,
            namespace=data.get("namespace", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "source": self.source,
            "sourceNamespace": self.source_namespace,
            "name": self.name,
        }
        if self.channel:
            out["channel"] = self.channel
        if self.starting_csv:
            out["startingCSV"] = self.starting_csv
        if self.install_plan_approval:
            out["installPlanApproval"] = self.install_plan_approval
        if self.config is not None:
            out["config"] = copy.deepcopy(self.config)
        if self.namespace:
            out["namespace"] = self.namespace
        return out


_REMOVAL_KEYS = {
    "operator_groups": "operatorGroups",
    "subscriptions": "subscriptions",
    "csvs": "clusterServiceVersions",
    "install_plan": "installPlans",
    "crds": "customResourceDefinitions",
    "api_service_definitions": "apiServiceDefinitions",
}


@dataclass
class RemovalBehavior:
    """What happens to each kind of resource when the policy is removed."""

    operator_groups: Optional[RemovalAction] = None
    subscriptions: Optional[RemovalAction] = None
    csvs: Optional[RemovalAction] = None
    install_plan: Optional[RemovalAction] = None
    crds: Optional[RemovalAction] = None
    api_service_definitions: Optional[RemovalAction] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RemovalBehavior:
        return cls(**{attr: _optional(RemovalAction, data.get(key)) for attr, key in _REMOVAL_KEYS.items()})

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for attr, key in _REMOVAL_KEYS.items():
            _put_enum(out, key, getattr(self, attr))
        return out


_STATUS_KEYS = {
    "catalog_source_unhealthy": "catalogSourceUnhealthy",
    "deployments_unavailable": "deploymentsUnavailable",
    "upgrades_available": "upgradesAvailable",
    "upgrades_progressing": "upgradesProgressing",
}


@dataclass
class StatusConfig:
    """How resource statuses affect the policy status and compliance."""

    catalog_source_unhealthy: Optional[StatusConfigAction] = None
    deployments_unavailable: Optional[StatusConfigAction] = None
    upgrades_available: Optional[StatusConfigAction] = None
    upgrades_progressing: Optional[StatusConfigAction] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StatusConfig:
        return cls(**{attr: _optional(StatusConfigAction, data.get(key)) for attr, key in _STATUS_KEYS.items()})

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for attr, key in _STATUS_KEYS.items():
            _put_enum(out, key, getattr(self, attr))
        return out


@dataclass
class OperatorPolicySpec:
    """Desired state of an OperatorPolicy."""

    compliance_type: ComplianceType
    subscription: SubscriptionSpec = field(default_factory=SubscriptionSpec)
    severity: Optional[Severity] = None
    remediation_action: Optional[RemediationAction] = None
    operator_group: Optional[OperatorGroup] = None
    versions: List[str] = field(default_factory=list)
    removal_behavior: RemovalBehavior = field(default_factory=RemovalBehavior)
    status_config: StatusConfig = field(default_factory=StatusConfig)

    def __post_init__(self) -> None:
        if any(not v for v in self.versions):
            raise ValueError("versions entries must not be empty")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OperatorPolicySpec:
        group = data.get("operatorGroup")
        return cls(
            compliance_type=ComplianceType(data.get("complianceType", "")),
            subscription=SubscriptionSpec.from_dict(data.get("subscription") or {}),
            severity=_optional(Severity, data.get("severity")),
            remediation_action=_optional(RemediationAction, data.get("remediationAction")),
            operator_group=OperatorGroup.from_dict(group) if group is not None else None,
            versions=list(data.get("versions") or []),
            removal_behavior=RemovalBehavior.from_dict(data.get("removalBehavior") or {}),
            status_config=StatusConfig.from_dict(data.get("statusConfig") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        _put_enum(out, "severity", self.severity)
        _put_enum(out, "remediationAction", self.remediation_action)
        out["complianceType"] = self.compliance_type.value
        if self.operator_group is not None:
            out["operatorGroup"] = self.operator_group.to_dict()
        out["subscription"] = self.subscription.to_dict()
        if self.versions:
            out["versions"] = list(self.versions)
        out["removalBehavior"] = self.removal_behavior.to_dict()
        out["statusConfig"] = self.status_config.to_dict()
        return out


@dataclass
class OperatorPolicyStatus:
    """Observed state of an OperatorPolicy."""

    compliance_state: Optional[ComplianceState] = None
    conditions: List[Dict[str, Any]] = field(default_factory=list)
    related_object: RelatedObject = field(default_factory=RelatedObject)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OperatorPolicyStatus:
        return cls(
            compliance_state=_optional(ComplianceState, data.get("compliant")),
            conditions=copy.deepcopy(list(data.get("conditions") or [])),
            related_object=RelatedObject.from_dict(data.get("relatedObject") or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        _put_enum(out, "compliant", self.compliance_state)
        if self.conditions:
            out["conditions"] = copy.deepcopy(self.conditions)
        out["relatedObject"] = self.related_object.to_dict()
        return out


@dataclass
class OperatorPolicy:
    """An OperatorPolicy resource."""

    spec: OperatorPolicySpec
    metadata: Dict[str, Any] = field(default_factory=dict)
    status: OperatorPolicyStatus = field(default_factory=OperatorPolicyStatus)
    api_version: str = str(V1BETA1)
    kind: str = KIND

    @property
    def name(self) -> str:
        return self.metadata.get("name", "")

    @property
    def namespace(self) -> str:
        return self.metadata.get("namespace", "")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OperatorPolicy:
        return cls(
            spec=OperatorPolicySpec.from_dict(data.get("spec") or {}),
            metadata=copy.deepcopy(data.get("metadata") or {}),
            status=OperatorPolicyStatus.from_dict(data.get("status") or {}),
            api_version=data.get("apiVersion") or str(V1BETA1),
            kind=data.get("kind") or KIND,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": copy.deepcopy(self.metadata),
            "spec": self.spec.to_dict(),
            "status": self.status.to_dict(),
        }


@dataclass
class OperatorPolicyList:
    """A list of OperatorPolicy resources."""

    items: List[OperatorPolicy] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    api_version: str = str(V1BETA1)
    kind: str = LIST_KIND

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OperatorPolicyList:
        return cls(
            items=[OperatorPolicy.from_dict(i) for i in data.get("items") or []],
            metadata=copy.deepcopy(data.get("metadata") or {}),
            api_version=data.get("apiVersion") or str(V1BETA1),
            kind=data.get("kind") or LIST_KIND,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": copy.deepcopy(self.metadata),
            "items": [i.to_dict() for i in self.items],
        }