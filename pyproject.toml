[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eraserapi"
version = "1.1.0"
description = "Configuration and resource models for a Kubernetes image-cleanup controller: durations, quantities, versioned schemas and defaults."
requires-python = ">=3.10"
dependencies = []
keywords = ["kubernetes", "containers", "images", "configuration", "api", "schema"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["eraserapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
