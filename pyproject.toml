[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zh07"
version = "0.1.0"
description = "Driver for Winsen ZH06 and ZH07 laser dust sensors over a binary stream"
requires-python = ">=3.10"
dependencies = []
keywords = ["zh07", "zh06", "winsen", "dust sensor", "particulate matter", "pm2.5", "air quality"]
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
    "Topic :: Scientific/Engineering :: Atmospheric Science",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zh07"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
