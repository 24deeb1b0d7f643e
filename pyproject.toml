[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "revide"
version = "0.1.0"
description = "LZ-String compression and a helper for sending LLVM module text to a running viewer"
requires-python = ">=3.10"
dependencies = []
keywords = ["lz-string", "compression", "lzw", "base64", "llvm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["revide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
