[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xpmanager"
version = "2.3.0"
description = "A command-line tool for encrypting a password database, files and directories with Fernet keys, and encoding strings."
requires-python = ">=3.10"
keywords = ["cli", "encryption", "fernet", "password", "encoding"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]
dependencies = [
    "cryptography",
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
xpm = "xpmanager.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xpmanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
