"""Dense four-dimensional tensors in NCHW layout."""

from __future__ import annotations

import random
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TensorDims:
    """Batch, channel, height and width of a tensor."""

    n: int
    c: int
    h: int
    w: int

    def volume(self) -> int:
        """Total number of elements."""
        return self.n * self.c * self.h * self.w


@dataclass
class Tensor:
    """A flat float buffer addressed by (n, c, h, w)."""

    dims: TensorDims
    data: list[float] = field(default_factory=list)
    non_zero_count: int = 0
    sparsity: float = 0.0

    def __post_init__(self) -> None:
        if not self.data:
            self.data = [0.0] * self.dims.volume()
        elif len(self.data) != self.dims.volume():
            raise ValueError("data length does not match tensor dimensions")

    @property
    def size(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def index(self, n: int, c: int, h: int, w: int) -> int:
        """Flat index of the element at (n, c, h, w)."""
        d = self.dims
        if not (0 <= n < d.n and 0 <= c < d.c and 0 <= h < d.h and 0 <= w < d.w):
            raise IndexError(f"address {(n, c, h, w)} outside tensor {d}")
        return ((n * d.c + c) * d.h + h) * d.w + w

    @staticmethod
    def _check_key(key) -> tuple[int, int, int, int]:
        if not isinstance(key, tuple) or len(key) != 4:
            raise TypeError("tensor keys are (n, c, h, w) tuples")
        return key

    def __getitem__(self, key) -> float:
        return self.data[self.index(*self._check_key(key))]

    def __setitem__(self, key, value: float) -> None:
        self.data[self.index(*self._check_key(key))] = float(value)

    def unravel(self, phy_addr: int) -> tuple[int, int, int, int]:
        """Decode a flat index into (n, c, h, w)."""
        d = self.dims
        w = phy_addr % d.w
        h = (phy_addr // d.w) % d.h
        c = (phy_addr // (d.w * d.h)) % d.c
        n = phy_addr // (d.w * d.h * d.c)
        return n, c, h, w

    def fill_random(
        self, min_val: float, max_val: float, sparsity: float, seed: int = 0
    ) -> None:
        """Fill with uniform values, zeroing each with probability ``sparsity``."""
        if not 0.0 <= sparsity <= 1.0:
            raise ValueError("sparsity must lie in [0, 1]")
        rng = random.Random(seed)
        self.non_zero_count = 0
        for i in range(len(self.data)):
            if rng.random() < sparsity:
                self.data[i] = 0.0
            else:
                self.data[i] = rng.uniform(min_val, max_val)
                self.non_zero_count += 1
        self.sparsity = self.non_zero_count / self.size if self.size else 0.0

    def count_non_zero(self) -> int:
        """Number of elements that are not zero."""
        return sum(1 for value in self.data if value != 0.0)

    def describe(self) -> str:
        d = self.dims
        return "\n".join(
            [
                f"non_zero_count: {self.non_zero_count}",
                f"size: {len(self.data)}",
                f"n: {d.n}",
                f"c: {d.c}",
                f"h: {d.h}",
                f"w: {d.w}",
            ]
        )