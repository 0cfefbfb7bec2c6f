[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "instantshare"
version = "0.1.0"
description = "Reactive, observable queries over an entity store, with an in-memory database for tests and previews"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "reactive", "observable", "queries", "subscriptions", "in-memory"]
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
    "Topic :: Database :: Front-Ends",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["instantshare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
