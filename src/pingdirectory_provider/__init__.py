"""
PingDirectory Provider - configuration management for PingDirectory servers.

This package exposes the PingDirectory Configuration API (``/config/v2``) as
provider resources and data sources with:
- Declarative create/read/update/delete of configuration objects
- Plan/state diffing into PATCH-style update operations
- Per-type validation and version compatibility checks
- Edit-only ``default_*`` variants for objects that always exist
"""

__version__ = "0.1.0"
