[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textdist"
version = "1.0.2"
description = "Lots of algorithms to compare how similar two sequences are"
requires-python = ">=3.10"
dependencies = []
keywords = ["jaro", "hamming", "levenshtein", "similarity", "distance"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
textdist = "textdist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["textdist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
