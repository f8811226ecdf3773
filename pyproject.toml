[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirekit"
version = "0.1.0"
description = "C-style string helpers, stream output, a buffered line reader, a printf-style formatter and an anti-aliased line rasterizer"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "printf", "formatting", "line-reader", "rasterizer", "anti-aliasing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wirekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
