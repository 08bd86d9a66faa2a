"""Validation rules, route documentation and an OpenAPI model for Flask applications."""

__version__ = "0.1.0"
__all__ = ["docs", "validation", "validators", "options", "openapi", "vecho"]