[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "courseplanner"
version = "1.0.0"
description = "Interactive course planner: load a course catalogue from CSV, search it and list it sorted."
requires-python = ">=3.10"
dependencies = []
keywords = ["courses", "catalogue", "planner", "csv", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
courseplanner = "courseplanner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["courseplanner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
