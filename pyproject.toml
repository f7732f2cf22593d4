[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clubsim"
version = "0.1.0"
description = "Event-driven simulator of a computer club's working day: queueing, station usage and revenue accounting"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "computer club", "events", "accounting", "queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clubsim = "clubsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["clubsim"]

[tool.pytest.ini_options]
addopts = "-ra"
