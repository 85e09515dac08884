[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "channelcore"
version = "0.1.0"
description = "Game-channel building blocks: bit flags, field geometry and limits, portal lookups, name aliases and GM command parsing."
requires-python = ">=3.10"
dependencies = []
keywords = ["mmorpg", "game-server", "footholds", "portals", "bitflags", "gm-commands"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["channelcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
