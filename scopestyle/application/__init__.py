from .registry import InjectionReport, StyleRegistry, default_registry

__all__ = ["InjectionReport", "StyleRegistry", "default_registry"]
