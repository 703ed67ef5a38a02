[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqliwidgets"
version = "1.0.3"
description = "Terminal-independent widget state for a SQL client: buttons, radio groups, modal dialogs, a searchable text area and wide result tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "widgets", "terminal", "sql", "modal", "table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Widget Sets",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqliwidgets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
