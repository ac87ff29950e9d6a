"""Runtime settings."""
