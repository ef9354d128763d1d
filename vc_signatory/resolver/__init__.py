"""DID resolution collaborators."""
