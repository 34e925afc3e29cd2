[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmrender"
version = "0.1.0"
description = "CommonMark syntax trees: node types, tree operations, CommonMark output and HTML escaping helpers"
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["markdown", "commonmark", "gfm", "ast", "renderer", "html-escaping"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cmrender"]

[tool.hatch.build.targets.sdist]
include = ["cmrender", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
