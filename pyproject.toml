[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "commitwise"
version = "0.0.1"
description = "Interactive terminal helper for writing consistent, templated Git commit messages"
requires-python = ">=3.10"
keywords = ["git", "commit", "conventional-commits", "gitmoji", "cli", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
commitwise = "commitwise.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["commitwise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
