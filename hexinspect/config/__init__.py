"""Configuration system for the byte inspector."""

from .inspector_config import InspectorConfig

__all__ = ["InspectorConfig"]
