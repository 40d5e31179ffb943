"""
Learn-Python - a small HTTP microservice template.

This package provides:
- Informational endpoints (welcome page, health, system info, version)
- Utility endpoints (ping, echo)
- Prometheus metrics and an OpenAPI document
"""

__version__ = "0.0.1"
