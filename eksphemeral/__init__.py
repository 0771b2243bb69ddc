"""EKSphemeral - terminal UI for short-lived EKS clusters."""

__version__ = "0.1.0"
