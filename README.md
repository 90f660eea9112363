# scnnsim

A small, dependency-free model of parts of a sparse convolutional neural
network accelerator's dataflow.

## What it contains

- `scnnsim.config.HardwareConfig` — a frozen dataclass with `num_pe` (64),
  `num_multipliers` (16) and `output_ports` (16). `num_pe` must be a perfect
  square; `grid_dim` is its square root (8 by default). Non-positive values
  raise `ValueError`.
- `scnnsim.tensor.TensorDims` and `scnnsim.tensor.Tensor` — a flat float
  buffer in NCHW layout.
  - `tensor[n, c, h, w]` reads and writes an element; an address outside the
    dimensions raises `IndexError`, a key that is not a 4-tuple raises
    `TypeError`.
  - `tensor.index(n, c, h, w)` gives the flat position, `tensor.unravel(i)`
    turns a flat position back into `(n, c, h, w)`.
  - `tensor.fill_random(min_val, max_val, sparsity, seed=0)` fills the tensor
    from a seeded generator, zeroing each element with probability
    `sparsity`, and records `non_zero_count` and `sparsity` (the fraction of
    non-zero elements).
  - `tensor.count_non_zero()` counts the non-zero elements;
    `tensor.describe()` returns a short text summary.
- `scnnsim.loader` —
  - `Element(value, addr, valid=True)`, where `addr` is an int or an
    `(n, c, h, w)` tuple.
  - `InputBuffer`, an ordered list of elements: `load(tensor)` appends every
    non-zero element of a tensor in flat order, `add(value, addr)` appends
    one, `len()` and iteration work as for a list, `describe()` returns one
    `value:… address:…` line per element.
  - `Loader(config=None)` with `load_ia(tensor)`, which splits the height and
    width of a tensor into a `grid_dim × grid_dim` grid of tiles (rounding
    tile size up, clamping to the last row and column) and puts each
    non-zero value into the `InputBuffer` of the PE owning its tile, in
    `loader.pe_buffers`.
- `scnnsim.mult_array` —
  - `PartialSum(value, addr, valid=True)`.
  - `MultArray(output_ports=None)` (16 ports by default).
    `cartesian_product(ia_vector, w_vector)` queues the product of every
    valid activation with every valid weight, at address `ia.addr + w.addr`.
    `pop_outputs()` removes and returns up to `output_ports` partial sums,
    oldest first; `has_output()` tells whether any are queued; `reset()`
    empties the queue; `describe()` returns one `Value: …, Addr: …` line per
    queued partial sum.

## Installation

```
pip install .
```

## Command line

```
scnnsim
```

multiplies the activations 1, 2, 3 (addresses 0, 1, 2) by the weights 4, 5, 6
(addresses 0, 1, 2) and prints each of the nine partial sums with its address.

```
scnnsim-loader
```

fills a random sparse input activation tensor and a filter tensor, prints a
summary of each, distributes the activations across the PEs and prints the
size of every PE's buffer, their total (`a:`) and the activation tensor's
non-zero count. Options: `--batch` (1), `--channels` (100), `--height` (224),
`--width` (224), `--filter-height` (11), `--filter-width` (11),
`--sparsity` (0.5) and `--seed` (0).

## Library use

```python
from scnnsim.tensor import Tensor, TensorDims
from scnnsim.loader import Element, Loader
from scnnsim.mult_array import MultArray

activations = Tensor(TensorDims(n=1, c=4, h=16, w=16))
activations.fill_random(0.0, 1.0, 0.5, seed=0)

loader = Loader()
loader.load_ia(activations)
assert sum(len(b) for b in loader.pe_buffers) == activations.count_non_zero()

array = MultArray()
array.cartesian_product([Element(1.0, 0), Element(2.0, 1)],
                        [Element(3.0, 0), Element(4.0, 1)])
while array.has_output():
    for psum in array.pop_outputs():
        print(psum.value, psum.addr)
```

## What it does not do

This is not a full accelerator simulation. Partial sums are only queued and
handed out; nothing accumulates them into an output tensor, so no
convolution result is ever produced. The PE buffers filled by the loader are
not fed to multiplier arrays, there is no cycle timing, and weights are not
distributed across PEs.

## Tests

```
pip install .[test]
pytest
```