[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsnotify"
version = "0.1.0"
description = "Building blocks for file system notification tools: operations, events, watch options, event delivery, debug formatting and text diffs."
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "notifications", "inotify", "kqueue", "events", "diff"]
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
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fsnotify"]

[tool.pytest.ini_options]
addopts = "-ra"
