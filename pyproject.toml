[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cppmconf"
version = "0.1.0"
description = "Typed data model and helpers for TOML manifests of C++ projects"
requires-python = ">=3.11"
keywords = ["c++", "cmake", "manifest", "toml", "build", "configuration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Build Tools",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cppmconf"]

[tool.pytest.ini_options]
addopts = "-ra"
