[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tupy"
version = "0.1.0"
description = "Typed models for music streaming Web API request bodies and responses"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "web-api", "models", "dataclasses", "audio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tupy"]

[tool.pytest.ini_options]
addopts = "-ra"
