[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vehicle_sentinel"
version = "0.1.0"
description = "Vehicle command gating, filtering, geometry helpers and safety-state models for autonomous driving stacks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "autonomous-driving",
    "vehicle",
    "control",
    "command-gate",
    "rate-limiter",
    "geometry",
    "minimum-risk-maneuver",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vehicle_sentinel"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
