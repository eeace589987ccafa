"""
Shared dataclasses used across the listings pipeline.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(slots=True, frozen=True)
class ProgrammeEntry:
    """One programme scanned from an at-a-glance page."""
    start_time: str
    end_time: str
    title: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


__all__ = ["ProgrammeEntry"]
