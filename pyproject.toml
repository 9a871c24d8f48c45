[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "limitbook"
version = "0.1.0"
description = "A price-time priority limit order book with limit and market orders and an interactive console."
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["order book", "matching engine", "trading", "limit order", "market order"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
limitbook = "limitbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["limitbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
