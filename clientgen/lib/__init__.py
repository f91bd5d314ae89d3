"""Settings and logging helpers for the clientgen tooling."""
