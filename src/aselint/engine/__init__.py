"""Lint engine: per-pass context, diagnostic building and rule orchestration."""
