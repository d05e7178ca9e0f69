import pytest

from configpolicy.v1 import ComplianceState, ComplianceType, RemediationAction
from configpolicy.v1beta1 import (
    LabelSelector,
    OperatorGroup,
    OperatorPolicy,
    OperatorPolicyList,
    OperatorPolicySpec,
    OperatorPolicyStatus,
    RemovalAction,
    RemovalBehavior,
    StatusConfig,
    StatusConfigAction,
    SubscriptionSpec,
    TargetNsOrSelector,
)


def _policy_dict():
    return {
        "apiVersion": "policy.open-cluster-management.io/v1beta1",
        "kind": "OperatorPolicy",
        "metadata": {"name": "test-operator-policy", "namespace": "op-1"},
        "spec": {
            "severity": "medium",
            "remediationAction": "Enforce",
            "complianceType": "Musthave",
            "operatorGroup": {
                "name": "og-single",
                "namespace": "op-1",
                "target": {"namespaces": ["op-1"]},
            },
            "subscription": {
                "source": "operatorhubio-catalog",
                "sourceNamespace": "olm",
                "name": "project-quay",
                "channel": "stable-3.8",
                "installPlanApproval": "Automatic",
                "namespace": "op-1",
            },
            "versions": ["quay-operator.v3.8.1"],
            "removalBehavior": {"operatorGroups": "DeleteIfUnused", "subscriptions": "Delete"},
            "statusConfig": {"upgradesAvailable": "StatusMessageOnly"},
        },
        "status": {
            "compliant": "Compliant",
            "relatedObject": {"object": {"kind": "Subscription", "metadata": {"name": "project-quay"}}},
        },
    }


def test_policy_round_trip():
    data = _policy_dict()
    assert OperatorPolicy.from_dict(data).to_dict() == data


def test_policy_fields_parsed():
    policy = OperatorPolicy.from_dict(_policy_dict())
    assert policy.name == "test-operator-policy"
    assert policy.namespace == "op-1"
    assert policy.spec.compliance_type is ComplianceType.MUST_HAVE
    assert policy.spec.remediation_action is RemediationAction.ENFORCE
    assert policy.spec.operator_group.target.namespaces == ["op-1"]
    assert policy.spec.subscription.name == "project-quay"
    assert policy.spec.removal_behavior.operator_groups is RemovalAction.DELETE_IF_UNUSED
    assert policy.spec.removal_behavior.csvs is None
    assert policy.spec.status_config.upgrades_available is StatusConfigAction.STATUS_MESSAGE_ONLY
    assert policy.status.compliance_state is ComplianceState.COMPLIANT


def test_policy_defaults_api_version_and_kind():
    policy = OperatorPolicy(spec=OperatorPolicySpec(compliance_type=ComplianceType.MUST_HAVE))
    out = policy.to_dict()
    assert out["apiVersion"] == "policy.open-cluster-management.io/v1beta1"
    assert out["kind"] == "OperatorPolicy"


def test_compliance_type_accepts_lower_case():
    spec = OperatorPolicySpec.from_dict({"complianceType": "mustnothave"})
    assert spec.compliance_type is ComplianceType.MUST_NOT_HAVE


def test_empty_version_rejected():
    with pytest.raises(ValueError):
        OperatorPolicySpec(compliance_type=ComplianceType.MUST_HAVE, versions=["v1", ""])


def test_invalid_removal_action_rejected():
    with pytest.raises(ValueError):
        RemovalBehavior.from_dict({"subscriptions": "Sometimes"})


def test_invalid_status_config_action_rejected():
    with pytest.raises(ValueError):
        StatusConfig.from_dict({"deploymentsUnavailable": "Maybe"})


def test_spec_without_operator_group_omits_it():
    spec = OperatorPolicySpec(compliance_type=ComplianceType.MUST_HAVE, subscription=SubscriptionSpec(name="quay"))
    out = spec.to_dict()
    assert "operatorGroup" not in out
    assert "versions" not in out
    assert out["subscription"]["name"] == "quay"


def test_status_always_has_related_object():
    out = OperatorPolicyStatus().to_dict()
    assert "relatedObject" in out
    assert "compliant" not in out


def test_target_with_selector_round_trip():
    data = {"selector": {"matchLabels": {"team": "a"}, "matchExpressions": [{"key": "env", "operator": "Exists"}]}}
    target = TargetNsOrSelector.from_dict(data)
    assert isinstance(target.selector, LabelSelector)
    assert target.to_dict() == data


def test_operator_group_service_account_round_trip():
    data = {"name": "og", "namespace": "ns", "target": {}, "serviceAccountName": "olm-sa"}
    assert OperatorGroup.from_dict(data).to_dict() == data


def test_list_round_trip():
    data = {
        "apiVersion": "policy.open-cluster-management.io/v1beta1",
        "kind": "OperatorPolicyList",
        "metadata": {},
        "items": [_policy_dict()],
    }
    parsed = OperatorPolicyList.from_dict(data)
    assert len(parsed.items) == 1
    assert parsed.to_dict() == data


def test_enum_string_values():
    assert str(RemovalAction.KEEP) == "Keep"
    assert StatusConfigAction("NonCompliant") is StatusConfigAction.NON_COMPLIANT