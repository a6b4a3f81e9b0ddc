[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlitescan"
version = "0.1.0"
description = "Discover tables, columns, foreign keys and indexes of an SQLite database and write them back as DDL"
requires-python = ">=3.10"
dependencies = []
keywords = ["sqlite", "schema", "discovery", "introspection", "ddl"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqlitescan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
