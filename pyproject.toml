[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordhash"
version = "0.1.0"
description = "Polynomial string hashing, an open-addressing hash table with linear and double-hash probing, and a straight-line Boggle solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "hash table", "open addressing", "double hashing", "boggle", "mt19937"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordhash-str = "wordhash.strhash:main"
wordhash-boggle = "wordhash.boggle:main"
wordhash-table-demo = "wordhash.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["wordhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
