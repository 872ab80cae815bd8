"""Inspector configuration: byte order and visible interpretations."""

from dataclasses import dataclass
from typing import List, Optional
import logging

from ..inspectable import INSPECTABLE_TYPES, LABELS, InspectableType

logger = logging.getLogger(__name__)


@dataclass
class InspectorConfig:
    """Byte inspector settings."""
    little_endian: bool = True
    labels: Optional[List[str]] = None  # None shows the whole catalogue

    def __post_init__(self):
        if self.labels is None:
            return
        unknown = [label for label in self.labels if label not in LABELS]
        if unknown:
            raise ValueError(f"Unknown inspectable types: {', '.join(unknown)}")

    def enabled_types(self) -> List[InspectableType]:
        """Enabled descriptors, always in catalogue order."""
        if self.labels is None:
            return list(INSPECTABLE_TYPES)
        wanted = set(self.labels)
        return [t for t in INSPECTABLE_TYPES if t.label in wanted]

    def to_dict(self) -> dict:
        return {
            "little_endian": self.little_endian,
            "labels": list(self.labels) if self.labels is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'InspectorConfig':
        labels = data.get("labels")
        return cls(
            little_endian=bool(data.get("little_endian", True)),
            labels=list(labels) if labels is not None else None,
        )

    @classmethod
    def for_profile(cls, profile: str) -> 'InspectorConfig':
        """Get a preset configuration by name."""
        configs = {
            "default": cls(),
            "integers": cls(
                labels=[
                    "binary", "octal",
                    "uint8", "int8", "uint16", "int16", "uint24", "int24",
                    "uint32", "int32", "int64", "uint64",
                ]
            ),
            "floats": cls(labels=["float16", "bfloat16", "float32", "float64"]),
            "text": cls(labels=["UTF-8", "UTF-16", "Pokemon Char"]),
        }

        if profile not in configs:
            logger.debug("Unknown profile %s, using default", profile)
        return configs.get(profile, configs["default"])
