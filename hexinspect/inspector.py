"""Apply the inspectable type catalogue to a byte window."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .coding import BytesLike
from .config import InspectorConfig

logger = logging.getLogger(__name__)

MISSING = "-"


@dataclass(frozen=True)
class InspectionRow:
    label: str
    min_bytes: int
    value: Optional[str]  # None when the window is too short

    @property
    def available(self) -> bool:
        return self.value is not None


class ByteInspector:
    """Renders a byte window under every enabled interpretation."""

    def __init__(self, config: Optional[InspectorConfig] = None):
        self.config = config if config is not None else InspectorConfig()

    def inspect(
        self, window: BytesLike, little_endian: Optional[bool] = None
    ) -> List[InspectionRow]:
        """Convert ``window`` with each enabled type, skipping those lacking bytes."""
        if little_endian is None:
            little_endian = self.config.little_endian
        data = bytes(window)

        rows: List[InspectionRow] = []
        for inspectable in self.config.enabled_types():
            if len(data) < inspectable.min_bytes:
                logger.debug(
                    "Skipping %s: need %d bytes, have %d",
                    inspectable.label,
                    inspectable.min_bytes,
                    len(data),
                )
                rows.append(InspectionRow(inspectable.label, inspectable.min_bytes, None))
                continue
            value = inspectable.convert(data, little_endian)
            rows.append(InspectionRow(inspectable.label, inspectable.min_bytes, value))
        return rows

    def render(self, window: BytesLike, little_endian: Optional[bool] = None) -> str:
        """Aligned ``label: value`` lines for every enabled type."""
        rows = self.inspect(window, little_endian)
        if not rows:
            return ""
        width = max(len(row.label) for row in rows)
        lines = []
        for row in rows:
            if row.value is None:
                value = MISSING
            elif _needs_repr(row.value):
                value = repr(row.value)
            else:
                value = row.value
            lines.append(f"{row.label.ljust(width)}: {value}")
        return "\n".join(lines)


def _needs_repr(value: str) -> bool:
    # Control characters and empty glyphs would vanish in plain text.
    return value == "" or not value.isprintable()
