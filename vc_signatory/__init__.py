"""Verifiable credential signatory: proof configuration and signing dispatch."""
