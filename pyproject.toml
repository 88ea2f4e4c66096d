[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aatools"
version = "0.1.0"
description = "Console messages, path helpers, filtered directory listings, file copying and process running for system administration tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["paths", "filesystem", "directory", "copy", "subprocess", "process-group", "console", "apparmor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aatools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
