"""Contracts (Protocol) implemented by the adapters.

Services depend on these abstractions, not on the concrete client.
"""
