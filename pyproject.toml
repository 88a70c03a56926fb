[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scarfgen"
version = "0.1.0"
description = "Generate two-colour scarf patterns with cellular automata and count their connected regions"
requires-python = ">=3.10"
keywords = [
    "cellular-automata",
    "elementary-automaton",
    "pattern",
    "knitting",
    "connected-components",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Artistic Software",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scarfgen = "scarfgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scarfgen"]

[tool.pytest.ini_options]
addopts = "-ra"
