import pytest

from scnnsim.config import HardwareConfig
from scnnsim.loader import Element, InputBuffer, Loader
from scnnsim.tensor import Tensor, TensorDims


def _filled(dims, value=1.0):
    tensor = Tensor(dims)
    tensor.data = [value] * dims.volume()
    return tensor


def test_load_keeps_only_non_zero_in_order():
    tensor = Tensor(TensorDims(1, 2, 3, 3))
    tensor[0, 0, 1, 2] = 3.0
    tensor[0, 1, 0, 0] = 4.0
    buffer = InputBuffer()
    buffer.load(tensor)
    assert len(buffer) == tensor.count_non_zero()
    assert [e.value for e in buffer] == [3.0, 4.0]
    assert [e.addr for e in buffer] == [(0, 0, 1, 2), (0, 1, 0, 0)]


def test_add_appends():
    buffer = InputBuffer()
    buffer.add(1.5, (0, 0, 0, 1))
    buffer.add(2.0, (0, 0, 1, 0))
    assert len(buffer) == 2
    assert list(buffer)[0] == Element(1.5, (0, 0, 0, 1))


def test_describe_format():
    buffer = InputBuffer()
    buffer.add(1.5, (0, 0, 0, 1))
    assert buffer.describe() == "value:1.5\taddress:0 0 0 1"


def test_loader_default_creates_pe_buffers():
    loader = Loader()
    loader.load_ia(_filled(TensorDims(1, 1, 8, 8)))
    assert len(loader.pe_buffers) == HardwareConfig().num_pe
    assert all(len(buffer) == 1 for buffer in loader.pe_buffers)


def test_loader_places_pixel_in_owning_pe():
    loader = Loader()
    loader.load_ia(_filled(TensorDims(1, 1, 8, 8)))
    for index, buffer in enumerate(loader.pe_buffers):
        (element,) = list(buffer)
        _, _, h, w = element.addr
        assert h * 8 + w == index


def test_loader_total_matches_non_zero_count():
    tensor = Tensor(TensorDims(1, 3, 20, 13))
    tensor.fill_random(0.0, 1.0, 0.5, seed=3)
    loader = Loader()
    loader.load_ia(tensor)
    assert sum(len(b) for b in loader.pe_buffers) == tensor.count_non_zero()


def test_loader_skips_zeros():
    tensor = Tensor(TensorDims(1, 1, 8, 8))
    loader = Loader()
    loader.load_ia(tensor)
    assert all(len(buffer) == 0 for buffer in loader.pe_buffers)


def test_loader_with_small_grid():
    config = HardwareConfig(num_pe=4)
    loader = Loader(config)
    loader.load_ia(_filled(TensorDims(1, 2, 4, 4)))
    assert len(loader.pe_buffers) == 4
    sizes = {len(buffer) for buffer in loader.pe_buffers}
    assert sizes == {2 * 4 * 4 // 4}


@pytest.mark.parametrize("h,w", [(9, 17), (224, 224), (3, 5)])
def test_every_element_lands_in_its_tile(h, w):
    loader = Loader()
    loader.load_ia(_filled(TensorDims(1, 1, h, w)))
    h_chunk = -(-h // 8)
    w_chunk = -(-w // 8)
    for index, buffer in enumerate(loader.pe_buffers):
        row, col = divmod(index, 8)
        for element in buffer:
            _, _, eh, ew = element.addr
            assert min(eh // h_chunk, 7) == row
            assert min(ew // w_chunk, 7) == col
    assert sum(len(b) for b in loader.pe_buffers) == h * w