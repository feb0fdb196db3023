[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thompsonfa"
version = "0.1.0"
description = "Nondeterministic finite automata with Thompson-style composition and a small regular-expression parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["nfa", "automata", "regex", "thompson", "parser", "formal-languages"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
thompsonfa = "thompsonfa.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["thompsonfa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
