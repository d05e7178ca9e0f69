"""Types of the v1 ConfigurationPolicy API."""

import copy
import enum
from dataclasses import MISSING, dataclass, field, fields
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union, get_args, get_origin

from .duration import parse_duration
from .groupversion import V1

KIND = "ConfigurationPolicy"
LIST_KIND = "ConfigurationPolicyList"


class _Exact(str, enum.Enum):
    def __str__(self) -> str:
        return self.value


class _Choice(_Exact):
    """A string enum that also accepts its values in other letter cases."""

    @classmethod
    def _missing_(cls, value: object):
        if isinstance(value, str):
            return next((m for m in cls if m.value.lower() == value.lower()), None)
        return None


class RemediationAction(_Choice):
    ENFORCE = "Enforce"
    INFORM = "Inform"


class Severity(_Choice):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PruneObjectBehavior(_Exact):
    DELETE_ALL = "DeleteAll"
    DELETE_IF_CREATED = "DeleteIfCreated"
    NONE = "None"


class ComplianceState(_Exact):
    COMPLIANT = "Compliant"
    NON_COMPLIANT = "NonCompliant"
    UNKNOWN_COMPLIANCY = "UnknownCompliancy"
    TERMINATING = "Terminating"


class ComplianceType(_Choice):
    MUST_NOT_HAVE = "Mustnothave"
    MUST_HAVE = "Musthave"
    MUST_ONLY_HAVE = "Mustonlyhave"


class MetadataComplianceType(_Choice):
    MUST_HAVE = "Musthave"
    MUST_ONLY_HAVE = "Mustonlyhave"


class IntervalIsNever(Exception):
    """Raised when an evaluation interval is set to ``never``."""

    def __init__(self, message: str = "the interval is set to never") -> None:
        super().__init__(message)


def _field(*, key: Optional[str] = None, always: bool = False, null: Any = None, **kwargs: Any):
    """A dataclass field with its JSON key and how it is omitted.

    Fields that are None are always left out (or written as ``null`` when given);
    other empty values are left out unless ``always`` is set.
    """
    return field(metadata={"key": key, "always": always, "null": null}, **kwargs)


def _json_key(f) -> str:
    if f.metadata.get("key"):
        return f.metadata["key"]
    head, *rest = f.name.split("_")
    return head + "".join(part.title() for part in rest)


def _parse_time(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _format_time(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _load(tp: Any, raw: Any) -> Any:
    origin = get_origin(tp)
    if origin is Union:
        return _load(next(a for a in get_args(tp) if a is not type(None)), raw)
    if origin is list:
        (item,) = get_args(tp)
        return [_load(item, x) for x in raw]
    if origin is dict:
        _, item = get_args(tp)
        return {k: _load(item, v) for k, v in raw.items()}
    if tp is Any:
        return copy.deepcopy(raw)
    if tp is datetime:
        return _parse_time(raw)
    if isinstance(tp, type) and issubclass(tp, _Model):
        return tp.from_dict(raw or {})
    return tp(raw)


def _dump(value: Any) -> Any:
    if isinstance(value, _Model):
        return value.to_dict()
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    if isinstance(value, dict):
        return {k: _dump(v) for k, v in value.items()}
    return copy.deepcopy(value)


class _Model:
    """Conversion between dataclasses and their JSON form."""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        kwargs = {}
        for f in fields(cls):
            raw = data.get(_json_key(f))
            if raw is None or raw == "":
                if f.default is not MISSING or f.default_factory is not MISSING:
                    continue
                raw = ""
            kwargs[f.name] = _load(f.type, raw)
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                if f.metadata.get("null") is not None:
                    out[_json_key(f)] = f.metadata["null"]
                continue
            if not value and not f.metadata.get("always"):
                continue
            out[_json_key(f)] = _dump(value)
        return out


@dataclass
class Condition(_Model):
    """A condition of a template evaluation."""

    type: str = _field(always=True)
    status: str = ""
    last_transition_time: Optional[datetime] = None
    reason: str = ""
    message: str = ""


@dataclass
class LabelSelectorRequirement(_Model):
    """A single label selector expression."""

    key: str = _field(always=True)
    operator: str = _field(always=True)
    values: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{{Key:{self.key} Operator:{self.operator} Values:[{' '.join(self.values)}]}}"


@dataclass
class Target(_Model):
    """Selects objects by name patterns and labels."""

    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    match_labels: Optional[Dict[str, str]] = _field(always=True, default=None)
    match_expressions: Optional[List[LabelSelectorRequirement]] = _field(always=True, default=None)

    def __post_init__(self) -> None:
        if not all((*self.include, *self.exclude)):
            raise ValueError("include and exclude entries must not be empty")

    def __str__(self) -> str:
        labels = "<nil>"
        if self.match_labels is not None:
            labels = "map[" + " ".join(f"{k}:{self.match_labels[k]}" for k in sorted(self.match_labels)) + "]"
        expressions = "<nil>"
        if self.match_expressions is not None:
            expressions = "[" + " ".join(map(str, self.match_expressions)) + "]"
        return (
            f"{{include:[{' '.join(self.include)}],exclude:[{' '.join(self.exclude)}],"
            f"matchLabels:{labels},matchExpressions:{expressions}}}"
        )

    @classmethod
    def from_dict(cls, data):
        """Build a Target from its JSON form."""
        return super().from_dict(data)

    def to_dict(self):
        """Return the JSON form of this Target."""
        return super().to_dict()


@dataclass
class EvaluationInterval(_Model):
    """Minimum time between evaluations in each compliance state."""

    compliant: str = ""
    noncompliant: str = ""

    @staticmethod
    def _parse(interval: str) -> timedelta:
        if interval == "":
            return timedelta(0)
        if interval == "never":
            raise IntervalIsNever()
        return parse_duration(interval)

    def compliant_interval(self) -> timedelta:
        """Interval while compliant; raises IntervalIsNever for ``never``."""
        return self._parse(self.compliant)

    def noncompliant_interval(self) -> timedelta:
        """Interval while noncompliant; raises IntervalIsNever for ``never``."""
        return self._parse(self.noncompliant)

    @classmethod
    def from_dict(cls, data):
        """Build an EvaluationInterval from its JSON form."""
        return super().from_dict(data)

    def to_dict(self):
        """Return the JSON form of this interval."""
        return super().to_dict()


@dataclass
class ObjectTemplate(_Model):
    """An object the policy checks, creates, modifies or deletes."""

    compliance_type: ComplianceType = _field(always=True)
    metadata_compliance_type: Optional[MetadataComplianceType] = None
    object_definition: Dict[str, Any] = _field(always=True, default_factory=dict)


@dataclass
class ConfigurationPolicySpec(_Model):
    """Desired state of a ConfigurationPolicy."""

    severity: Optional[Severity] = None
    remediation_action: Optional[RemediationAction] = _field(null="", default=None)
    namespace_selector: Target = _field(always=True, default_factory=Target)
    object_templates: List[ObjectTemplate] = _field(key="object-templates", default_factory=list)
    object_templates_raw: str = _field(key="object-templates-raw", default="")
    evaluation_interval: EvaluationInterval = _field(always=True, default_factory=EvaluationInterval)
    prune_object_behavior: PruneObjectBehavior = _field(always=True, default=PruneObjectBehavior.NONE)

    @classmethod
    def from_dict(cls, data):
        """Build a spec from its JSON form."""
        return super().from_dict(data)

    def to_dict(self):
        """Return the JSON form of this spec."""
        return super().to_dict()


@dataclass
class Validity(_Model):
    """Whether a template is valid, and why not."""

    valid: Optional[bool] = _field(always=True, default=None)
    reason: str = ""


@dataclass
class TemplateStatus(_Model):
    """Evaluation result of one object template."""

    compliance_state: Optional[ComplianceState] = _field(key="Compliant", default=None)
    conditions: List[Condition] = field(default_factory=list)
    validity: Validity = _field(key="Validity", always=True, default_factory=Validity)


@dataclass
class ObjectMetadata(_Model):
    """Name and namespace of an object processed by a policy."""

    name: str = ""
    namespace: str = ""


@dataclass
class ObjectResource(_Model):
    """An object identified by a policy as needing validation."""

    kind: str = ""
    api_version: str = ""
    metadata: ObjectMetadata = _field(always=True, default_factory=ObjectMetadata)


@dataclass
class ObjectProperties(_Model):
    """Ownership details of a related object."""

    created_by_policy: Optional[bool] = _field(always=True, default=None)
    uid: str = ""


@dataclass
class RelatedObject(_Model):
    """An object matched by a policy, with its compliance."""

    object: ObjectResource = _field(always=True, default_factory=ObjectResource)
    compliant: str = ""
    reason: str = ""
    properties: Optional[ObjectProperties] = _field(always=True, default=None)

    @classmethod
    def from_dict(cls, data):
        """Build a RelatedObject from its JSON form."""
        return super().from_dict(data)

    def to_dict(self):
        """Return the JSON form of this related object."""
        return super().to_dict()


@dataclass
class ConfigurationPolicyStatus(_Model):
    """Observed state of a ConfigurationPolicy."""

    compliance_state: Optional[ComplianceState] = _field(key="compliant", default=None)
    compliancy_details: List[TemplateStatus] = field(default_factory=list)
    last_evaluated: str = ""
    last_evaluated_generation: int = 0
    related_objects: List[RelatedObject] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        """Build a status from its JSON form."""
        return super().from_dict(data)

    def to_dict(self):
        """Return the JSON form of this status."""
        return super().to_dict()


@dataclass
class CompliancePerClusterStatus(_Model):
    """Aggregate status of the policies on one cluster."""

    aggregate_policy_status: Dict[str, ConfigurationPolicyStatus] = _field(
        key="aggregatePoliciesStatus", default_factory=dict
    )
    compliance_state: Optional[ComplianceState] = _field(key="compliant", default=None)
    cluster_name: str = _field(key="clustername", default="")


ComplianceMap = Dict[str, CompliancePerClusterStatus]


@dataclass
class ConfigurationPolicy(_Model):
    """A ConfigurationPolicy resource."""

    metadata: Dict[str, Any] = _field(always=True, default_factory=dict)
    spec: Optional[ConfigurationPolicySpec] = _field(always=True, default=None)
    status: ConfigurationPolicyStatus = _field(always=True, default_factory=ConfigurationPolicyStatus)
    api_version: str = _field(always=True, default=str(V1))
    kind: str = _field(always=True, default=KIND)

    @property
    def name(self) -> str:
        return self.metadata.get("name", "")

    @property
    def namespace(self) -> str:
        return self.metadata.get("namespace", "")

    @classmethod
    def from_dict(cls, data):
        """Build a policy from its JSON form."""
        return super().from_dict(data)

    def to_dict(self):
        """Return the JSON form of this policy."""
        return super().to_dict()


@dataclass
class ConfigurationPolicyList(_Model):
    """A list of ConfigurationPolicy resources."""

    items: List[ConfigurationPolicy] = _field(always=True, default_factory=list)
    metadata: Dict[str, Any] = _field(always=True, default_factory=dict)
    api_version: str = _field(always=True, default=str(V1))
    kind: str = _field(always=True, default=LIST_KIND)

    @classmethod
    def from_dict(cls, data):
        """Build a policy list from its JSON form."""
        return super().from_dict(data)

    def to_dict(self):
        """Return the JSON form of this policy list."""
        return super().to_dict()