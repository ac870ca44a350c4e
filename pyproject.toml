[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rsskit"
version = "0.1.0"
description = "Read, write and validate RSS feed elements with the Python standard library."
requires-python = ">=3.10"
dependencies = []
keywords = ["rss", "feed", "syndication", "xml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: XML",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rsskit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
