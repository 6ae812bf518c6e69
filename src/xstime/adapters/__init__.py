"""Adapters (infrastructure) for xstime.

Provide concrete implementations of the interface contracts (offset
resolvers, zone clocks) plus bindings into persistence frameworks.

Dependency rule: may import `xstime.domain` and `xstime.interfaces`; the
domain must not import this package at module import time.
"""
