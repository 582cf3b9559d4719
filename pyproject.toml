[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shexpand"
version = "0.1.0"
description = "Shell variables and environments, printf-style format expansion, read-style field splitting and shell-script detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "sh", "bash", "environment", "printf", "ifs", "read", "shebang"]
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
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shexpand"]

[tool.pytest.ini_options]
addopts = "-ra"
