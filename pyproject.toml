[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordbridge"
version = "0.1.0"
description = "Word-by-word English to French or Spanish translation with aligned word embeddings"
requires-python = ">=3.10"
dependencies = []
keywords = ["word embeddings", "translation", "cosine similarity", "nlp", "bilingual lexicon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Natural Language :: English",
    "Natural Language :: French",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordbridge = "wordbridge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordbridge"]

[tool.pytest.ini_options]
addopts = "-ra"
