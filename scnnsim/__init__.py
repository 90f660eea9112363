"""Sparse CNN accelerator model: hardware config, NCHW tensors, PE loading and the multiplier array."""

__version__ = "0.1.0"
__all__ = ["config", "tensor", "loader", "mult_array", "cli"]