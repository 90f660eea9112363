[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scnnsim"
version = "0.1.0"
description = "A small model of a sparse CNN accelerator dataflow: NCHW tensors, per-PE input loading and a Cartesian-product multiplier array."
requires-python = ">=3.10"
dependencies = []
keywords = ["scnn", "sparse", "cnn", "accelerator", "simulation", "hardware-modeling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scnnsim = "scnnsim.cli:main"
scnnsim-loader = "scnnsim.cli:loader_main"

[tool.hatch.build.targets.wheel]
packages = ["scnnsim"]

[tool.pytest.ini_options]
addopts = "-ra"
