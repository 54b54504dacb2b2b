[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "memsto"
version = "0.1.0"
description = "In-memory caches of monitoring configuration that resynchronise from a backing store on a timer"
requires-python = ">=3.11"
dependencies = []
keywords = ["monitoring", "alerting", "cache", "synchronisation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["memsto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
