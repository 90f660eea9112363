"""Command-line demonstrations of the multiplier array and the loader."""

from __future__ import annotations

import argparse

from .loader import Element, InputBuffer, Loader
from .mult_array import MultArray
from .tensor import Tensor, TensorDims


def main(argv: list[str] | None = None) -> int:
    """Multiply a small activation vector by a weight vector and print the products."""
    parser = argparse.ArgumentParser(
        description="Run the multiplier array on a fixed example."
    )
    parser.parse_args(argv)

    ia_vector = [Element(1.0, 0), Element(2.0, 1), Element(3.0, 2)]
    w_vector = [Element(4.0, 0), Element(5.0, 1), Element(6.0, 2)]

    mult_array = MultArray()
    mult_array.cartesian_product(ia_vector, w_vector)
    print(mult_array.describe())
    mult_array.reset()
    return 0


def loader_main(argv: list[str] | None = None) -> int:
    """Generate random activations and weights and tile them across the PEs."""
    parser = argparse.ArgumentParser(
        description="Load a random sparse activation tensor into the PE buffers."
    )
    parser.add_argument("--batch", type=int, default=1)
    parser.add_argument("--channels", type=int, default=100)
    parser.add_argument("--height", type=int, default=224)
    parser.add_argument("--width", type=int, default=224)
    parser.add_argument("--filter-height", type=int, default=11)
    parser.add_argument("--filter-width", type=int, default=11)
    parser.add_argument("--sparsity", type=float, default=0.5)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args(argv)

    input_activation = Tensor(
        TensorDims(args.batch, args.channels, args.height, args.width)
    )
    filter_weight = Tensor(
        TensorDims(1, args.channels, args.filter_height, args.filter_width)
    )
    input_activation.fill_random(0.0, 1.0, args.sparsity, args.seed)
    filter_weight.fill_random(0.0, 1.0, args.sparsity, args.seed)

    print(input_activation.describe())
    print(filter_weight.describe())

    weight_buffer = InputBuffer()
    weight_buffer.load(filter_weight)

    loader = Loader()
    loader.load_ia(input_activation)

    total = 0
    for buffer in loader.pe_buffers:
        print(f"size: {len(buffer)}")
        total += len(buffer)
    print(f"a: {total}")
    print(f"input_activation.size: {input_activation.non_zero_count}")
    return 0