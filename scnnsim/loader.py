"""Input buffers and the loader that tiles activations across the PE grid."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from .config import HardwareConfig
from .tensor import Tensor

Address = Union[int, tuple[int, int, int, int]]


@dataclass
class Element:
    """A non-zero value together with its address."""

    value: float
    addr: Address
    valid: bool = True


@dataclass
class InputBuffer:
    """An ordered list of non-zero elements."""

    elements: list[Element] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def load(self, tensor: Tensor) -> None:
        """Append every non-zero element of ``tensor`` in flat order."""
        for flat, value in enumerate(tensor.data):
            if value != 0.0:
                self.elements.append(Element(value, tensor.unravel(flat)))

    def add(self, value: float, addr: Address) -> None:
        self.elements.append(Element(value, addr))

    def describe(self) -> str:
        lines = []
        for element in self.elements:
            addr = element.addr
            coords = " ".join(map(str, addr)) if isinstance(addr, tuple) else str(addr)
            lines.append(f"value:{element.value:g}\taddress:{coords}")
        return "\n".join(lines)


class Loader:
    """Distributes the non-zero activations of a tensor over the PE grid."""

    def __init__(self, config: HardwareConfig | None = None) -> None:
        self.config = config or HardwareConfig()
        self.pe_buffers: list[InputBuffer] = []

    def load_ia(self, tensor: Tensor) -> None:
        """Split the tensor into planar tiles, one per PE, skipping zeros."""
        grid_dim = self.config.grid_dim
        self.pe_buffers = [InputBuffer() for _ in range(self.config.num_pe)]
        h_chunk = -(-tensor.dims.h // grid_dim)
        w_chunk = -(-tensor.dims.w // grid_dim)

        for flat, value in enumerate(tensor.data):
            if value == 0.0:
                continue
            addr = tensor.unravel(flat)
            _, _, h, w = addr
            pe_r = min(h // h_chunk, grid_dim - 1)
            pe_c = min(w // w_chunk, grid_dim - 1)
            self.pe_buffers[pe_r * grid_dim + pe_c].add(value, addr)