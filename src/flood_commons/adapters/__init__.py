"""Adapters – bridges from request descriptors to third-party HTTP clients."""
