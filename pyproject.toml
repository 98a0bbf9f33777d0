[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labstructs"
version = "0.1.0"
description = "Classic containers (vector, linked list, stack, queue) and small exercises built on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "vector", "linked list", "stack", "queue", "ring buffer", "bfs"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labstructs-reactions = "labstructs.reactions:main"
labstructs-practice = "labstructs.practice:main"

[tool.hatch.build.targets.wheel]
packages = ["labstructs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
