[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "socialxml"
version = "0.1.0"
description = "Tools for social-network XML documents: tag error detection and correction, XML to JSON conversion, follower graphs and post search"
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "json", "social network", "graph", "validation", "search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
socialxml-check = "socialxml.error_detect:main"

[tool.hatch.build.targets.wheel]
packages = ["socialxml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
