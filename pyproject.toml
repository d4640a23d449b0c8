[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coldl3"
version = "0.1.0"
description = "Block sync, commitments, HotStuff-style consensus with PoW merge mining, and a header bridge for the COLD L3 chain, on asyncio"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "consensus", "hotstuff", "proof-of-work", "bridge", "commitments", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["coldl3"]

[tool.pytest.ini_options]
addopts = "-ra"
