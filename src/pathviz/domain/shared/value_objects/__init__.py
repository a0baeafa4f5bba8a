"""Shared value objects used across domains."""

from pathviz.domain.shared.value_objects.backend_model import BackendModel

__all__ = ["BackendModel"]
