"""Application layer - configuration loading and orchestration."""
