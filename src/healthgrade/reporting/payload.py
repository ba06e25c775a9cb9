"""JSON payloads for health evaluations."""

from __future__ import annotations

from healthgrade.constants.reporting import SCHEMA_VERSION
from healthgrade.model import CheckStatus, HealthEvaluation
from healthgrade.types import JsonObject


def check_to_dict(check: CheckStatus) -> JsonObject:
    """Serialize one check with severities as their uppercase names."""
    return {
        "name": check.name,
        "healthy": check.healthy,
        "severity": check.severity.value if check.severity is not None else None,
        "effective": check.effective.value,
        "anomalous": check.anomalous,
    }


def build_payload(evaluation: HealthEvaluation) -> JsonObject:
    """Build the stable JSON document for an evaluation."""
    return {
        "schema_version": SCHEMA_VERSION,
        "overall": evaluation.overall.value,
        "checks": [check_to_dict(check) for check in evaluation.checks],
        "discarded": list(evaluation.discarded),
    }
