[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libftplus"
version = "1.0.0"
description = "Character tests, integer conversions, byte-buffer and string routines, a linked list, descriptor output, a line reader and a minimal printf."
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "memory", "printf", "linked list", "get_next_line", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libftplus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
