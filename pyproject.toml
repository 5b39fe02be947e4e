[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookstore"
version = "0.1.0"
description = "A small in-memory REST service for managing a list of books"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["books", "rest", "api", "crud", "flask"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bookstore = "bookstore.server:main"

[tool.hatch.build.targets.wheel]
packages = ["bookstore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
