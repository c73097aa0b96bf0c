"""
Core application utilities.

This package provides:
- Application-level settings (separate from DB settings)
- Logging configuration with request context
- Domain error types raised by services
- Dependency helpers (current user resolution from a bearer token)
"""
