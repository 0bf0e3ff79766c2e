"""
Shared utilities for argcache.

This package aggregates the cross-cutting building blocks used by the
key generation and caching packages:

- config: Settings via pydantic-settings
- logging: Structured logging with correlation context
- metrics: Prometheus cache counters
- errors: Canonical error types

Do not import from argcache into shared/.
"""
