[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udpresolver"
version = "0.1.0"
description = "A small UDP name-resolution server and interactive client for forward and reverse IPv4 lookups"
requires-python = ">=3.10"
dependencies = []
keywords = ["dns", "udp", "resolver", "reverse-lookup", "networking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
udpresolver-server = "udpresolver.server:main"
udpresolver-client = "udpresolver.client:main"

[tool.hatch.build.targets.wheel]
packages = ["udpresolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
