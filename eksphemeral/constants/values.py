"""Scalar constants: titles, link templates and user-facing texts."""

from typing import Final

APP_TITLE: Final = "EKSphemeral"

# ============================================================================
# Deep links
# ============================================================================

CONSOLE_LINK_TEMPLATE: Final = "https://console.aws.amazon.com/eks/home?#/clusters/{name}"
CONSOLE_LINK_TOOLTIP: Final = (
    "this link takes you to the AWS console where you can view "
    "the details of the EKS cluster"
)
KUBECONFIG_ALTERNATIVES_URL: Final = (
    "https://docs.aws.amazon.com/eks/latest/userguide/create-kubeconfig.html"
)
AWS_CLI_MIN_VERSION: Final = "1.16.156"

# ============================================================================
# Banner messages
# ============================================================================

PROGRESS_MESSAGE: Final = "Please wait..."
PROVISIONING_MESSAGE: Final = (
    "Provisioning cluster with ID {cluster_id} now! This can take up to "
    "15 minutes, will try to notify you via mail."
)
DETAIL_LOOKUP_FAILED_MESSAGE: Final = "looking up details for cluster {cluster_id} failed"
ACTION_IN_PROGRESS_MESSAGE: Final = "{action} for {target} is already in progress"
NO_CLUSTERS_MESSAGE: Final = "No clusters found"

__all__ = [
    "ACTION_IN_PROGRESS_MESSAGE",
    "APP_TITLE",
    "AWS_CLI_MIN_VERSION",
    "CONSOLE_LINK_TEMPLATE",
    "CONSOLE_LINK_TOOLTIP",
    "DETAIL_LOOKUP_FAILED_MESSAGE",
    "KUBECONFIG_ALTERNATIVES_URL",
    "NO_CLUSTERS_MESSAGE",
    "PROGRESS_MESSAGE",
    "PROVISIONING_MESSAGE",
]
