"""Data models for the EKSphemeral TUI."""
