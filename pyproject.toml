[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlproc"
version = "0.1.0"
description = "Text utilities for a SQL query processor: string helpers, query error types and UTF-8/UTF-16/UTF-32 code-unit conversion."
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "utf-8", "utf-16", "utf-32", "unicode", "strings", "transcoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["sqlproc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
