"""
Portfolio dashboard core: domain model, use cases and in-memory adapters.
"""
