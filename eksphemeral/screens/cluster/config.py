"""Cluster screen configuration - widget IDs and panel field labels."""

from __future__ import annotations

# =============================================================================
# Widget IDs
# =============================================================================

STATUS_BANNER_ID = "status-banner"
LOADING_INDICATOR_ID = "loading-indicator"
CLUSTER_LIST_ID = "cluster-list"
REFRESH_BUTTON_ID = "refresh-btn"
CREATE_BUTTON_ID = "create-btn"
EMPTY_STATE_ID = "empty-state"

# =============================================================================
# Card buttons: (label, action)
# =============================================================================

CARD_BUTTONS: list[tuple[str, str]] = [
    ("Show Config", "config"),
    ("Prolong", "prolong"),
    ("Details…", "details"),
]

# =============================================================================
# Detail panel labels
# =============================================================================

DETAIL_FIELD_LABELS: dict[str, str] = {
    "name": "Name",
    "kube_version": "Kubernetes version",
    "num_workers": "Number of worker nodes",
    "created_at": "Created at",
    "timeout_minutes": "Timeout",
    "ttl_minutes_remaining": "TTL",
    "owner": "Owner",
}

STATUS_FIELD_LABELS: dict[str, str] = {
    "status": "Status",
    "endpoint": "Endpoint",
    "platform_version": "Platform version",
    "vpc_config": "VPC config",
    "iam_role": "IAM role",
}
