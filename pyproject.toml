[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iockit"
version = "0.1.0"
description = "A small, explicit inversion-of-control container with deterministic boot, ordered events and lifecycle hooks."
requires-python = ">=3.10"
dependencies = []
keywords = ["ioc", "dependency-injection", "container", "beans", "events", "lifecycle"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ioctl = "iockit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iockit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
