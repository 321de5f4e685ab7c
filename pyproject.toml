[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fswatcher"
version = "0.1.0"
description = "File change monitoring built on a stat-based polling monitor"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "monitor", "watch", "polling", "file-changes"]
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fswatcher"]

[tool.pytest.ini_options]
addopts = "-ra"
