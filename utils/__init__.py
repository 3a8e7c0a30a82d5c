"""Shared helpers for record validation."""
