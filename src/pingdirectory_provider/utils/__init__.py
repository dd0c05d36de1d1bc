"""
Utilities for talking to the PingDirectory Configuration API.

This package holds the HTTP client and the helpers that turn API responses
and failures into state values and diagnostics.
"""
