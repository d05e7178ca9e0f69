# configpolicy

Typed Python models for policy resources in the
`policy.open-cluster-management.io` API group.

- `configpolicy.v1`: `ConfigurationPolicy`, `ConfigurationPolicyList` and
  their parts: `ConfigurationPolicySpec`, `ConfigurationPolicyStatus`,
  `Target` (namespace selector), `EvaluationInterval`, `ObjectTemplate`,
  `TemplateStatus`, `RelatedObject` and more, plus the string enums
  `RemediationAction`, `Severity`, `ComplianceType`,
  `MetadataComplianceType`, `ComplianceState` and `PruneObjectBehavior`.
  `RemediationAction`, `Severity`, `ComplianceType` and
  `MetadataComplianceType` accept their values in any letter case
  (`ComplianceType("musthave") is ComplianceType.MUST_HAVE`).
- `configpolicy.v1beta1`: `OperatorPolicy`, `OperatorPolicyList`,
  `OperatorPolicySpec`, `SubscriptionSpec`, `OperatorGroup`,
  `RemovalBehavior`, `StatusConfig` and the enums `RemovalAction` and
  `StatusConfigAction`.
- `configpolicy.groupversion`: `GroupVersion` and `GroupVersionResource`,
  with the constants `V1` and `V1BETA1`.
- `configpolicy.duration`: `parse_duration`, which turns strings such as
  `"1h30m"`, `"1.5s"` or `"-250ms"` into a `datetime.timedelta`.

Each resource model converts to and from the plain dictionary form used in
JSON and YAML manifests with `from_dict` and `to_dict`.

## Installation

```
pip install .
```

## Example

```python
from configpolicy.v1 import ConfigurationPolicy, IntervalIsNever

policy = ConfigurationPolicy.from_dict({
    "apiVersion": "policy.open-cluster-management.io/v1",
    "kind": "ConfigurationPolicy",
    "metadata": {"name": "foo", "namespace": "default"},
    "spec": {
        "severity": "low",
        "remediationAction": "inform",
        "namespaceSelector": {"include": ["default", "kube-*"], "exclude": ["kube-system"]},
        "evaluationInterval": {"compliant": "10m", "noncompliant": "never"},
        "object-templates": [
            {"complianceType": "musthave", "objectDefinition": {"kind": "ConfigMap"}},
        ],
    },
})

print(policy.name)                                             # foo
print(policy.spec.evaluation_interval.compliant_interval())   # 0:10:00
try:
    policy.spec.evaluation_interval.noncompliant_interval()
except IntervalIsNever:
    print("never reevaluated while noncompliant")

print(policy.to_dict()["spec"]["namespaceSelector"])
# {'include': ['default', 'kube-*'], 'exclude': ['kube-system']}
```

An empty interval means zero; the word `never` raises `IntervalIsNever`;
anything that is not a valid duration raises `ValueError`.

```python
from configpolicy.groupversion import V1

gvr = V1.with_resource("configurationpolicies")
print(gvr.group_version())   # policy.open-cluster-management.io/v1
```

## What it does not do

This package only describes and converts policy resources. It does not
connect to a cluster, watch or evaluate policies, create or delete objects,
or install operators.

## Tests

```
pip install .[test]
pytest
```