"""Multiplier array computing the Cartesian product of activations and weights."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

from .config import HardwareConfig
from .loader import Element


@dataclass
class PartialSum:
    """A product awaiting accumulation at the given output address."""

    value: float
    addr: int
    valid: bool = True


class MultArray:
    """Queues every activation-weight product and drains them port by port."""

    def __init__(self, output_ports: int | None = None) -> None:
        self.output_ports = output_ports or HardwareConfig().output_ports
        self.output_queue: deque[PartialSum] = deque()

    def reset(self) -> None:
        self.output_queue.clear()

    def cartesian_product(
        self, ia_vector: Iterable[Element], w_vector: Iterable[Element]
    ) -> None:
        """Queue the product of every valid activation with every valid weight."""
        weights = [w for w in w_vector if w.valid]
        for ia in ia_vector:
            if not ia.valid:
                continue
            for w in weights:
                self.output_queue.append(
                    PartialSum(ia.value * w.value, ia.addr + w.addr)
                )

    def pop_outputs(self) -> list[PartialSum]:
        """Remove and return up to ``output_ports`` partial sums, oldest first."""
        count = min(self.output_ports, len(self.output_queue))
        return [self.output_queue.popleft() for _ in range(count)]

    def has_output(self) -> bool:
        return bool(self.output_queue)

    def describe(self) -> str:
        return "\n".join(
            f"Value: {psum.value:g}, Addr: {psum.addr}" for psum in self.output_queue
        )