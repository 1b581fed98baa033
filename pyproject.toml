[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probetable"
version = "0.1.0"
description = "Open-addressing hash table with linear and double-hash probing, a seeded string hash, and a straight-line Boggle solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "open addressing", "double hashing", "string hash", "boggle", "mt19937"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
probetable-strhash = "probetable.strhash:main"
probetable-boggle = "probetable.boggle:main"
probetable-demo = "probetable.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["probetable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
