[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "librarydash"
version = "0.1.0"
description = "A small arcade dodging game: run, jump and glide through a library while furniture falls from above."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "platformer", "pygame", "dodge"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
librarydash = "librarydash.app:main"

[tool.hatch.build.targets.wheel]
packages = ["librarydash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
