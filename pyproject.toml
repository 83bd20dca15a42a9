[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chunkheap"
version = "0.1.0"
description = "A simulated first-fit heap allocator with an address-ordered free list and coalescing"
requires-python = ">=3.10"
dependencies = []
keywords = ["malloc", "allocator", "heap", "free-list", "memory", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chunkheap-check = "chunkheap.check:main"

[tool.hatch.build.targets.wheel]
packages = ["chunkheap"]

[tool.pytest.ini_options]
addopts = "-ra"
