[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proto_engine"
version = "0.1.0"
description = "A minimal 2D game engine on pygame with frame timing and per-frame input state tracking"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "engine", "pygame", "input", "game-loop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
proto-engine = "proto_engine.main:main"

[tool.hatch.build.targets.wheel]
packages = ["proto_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
