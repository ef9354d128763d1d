"""Issuance of signed verifiable credentials."""
