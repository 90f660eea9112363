"""Hardware configuration of the simulated accelerator."""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt


@dataclass(frozen=True)
class HardwareConfig:
    """Sizes of the processing-element array and its multipliers."""

    num_pe: int = 64
    num_multipliers: int = 16
    output_ports: int = 16

    def __post_init__(self) -> None:
        for name in ("num_pe", "num_multipliers", "output_ports"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        root = isqrt(self.num_pe)
        if root * root != self.num_pe:
            raise ValueError("num_pe must be a perfect square to form a PE grid")

    @property
    def grid_dim(self) -> int:
        """Side length of the square PE grid."""
        return isqrt(self.num_pe)