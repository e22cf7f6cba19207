[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bancoexamen"
version = "0.1.0"
description = "Interactive exam question bank with Bloom taxonomy levels and plain-text storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["exam", "questions", "bloom", "taxonomy", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bancoexamen = "bancoexamen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bancoexamen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
