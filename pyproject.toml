[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursorsync"
version = "0.3.1"
description = "Keep a project's .cursor rules, skills and commands in sync with a remote Git repository"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["cursor", "git", "sync", "rules", "skills", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cursor-sync = "cursorsync.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cursorsync"]

[tool.pytest.ini_options]
addopts = "-ra"
