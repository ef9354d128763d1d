"""Credential persistence."""
