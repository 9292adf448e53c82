[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit"
version = "0.1.0"
description = "Classic competitive-programming problems solved as small, tested Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "graphs",
    "number-theory",
    "sudoku",
    "roman-numerals",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokit-roman = "algokit.roman:main"
algokit-sudoku = "algokit.sudoku:main"

[tool.hatch.build.targets.wheel]
packages = ["algokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
