[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acrotester"
version = "0.1.0"
description = "Helpers for a device test station: settings, test-site grids, message logs, a TCP client and small utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "test-station", "settings", "tcp", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["acrotester"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
