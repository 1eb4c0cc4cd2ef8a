"""Core of the client: configuration, errors, wire models and contracts.

Nothing here performs I/O; the adapters package does.
"""
