[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petnet"
version = "0.1.0"
description = "Support library for a user-space network stack: addresses, checksums, port maps, ring buffers and JSON configuration"
requires-python = ">=3.10"
dependencies = []
keywords = ["networking", "checksum", "ring buffer", "ipv4", "mac address", "port allocation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["petnet"]

[tool.pytest.ini_options]
addopts = "-ra"
