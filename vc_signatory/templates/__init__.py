"""Credential template registries."""
