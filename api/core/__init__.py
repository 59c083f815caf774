"""
Core utilities shared across the feedback API.

This package hosts configuration (env vars, paths) and cross-cutting helpers
such as logging setup. Routers and services depend on these primitives
instead of reading the environment themselves.
"""
