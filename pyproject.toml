[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "devicemanager"
version = "1.0.0"
description = "Create, number and report analog and digital devices with pluggable ID generators, randomizers and status strategies."
requires-python = ">=3.10"
dependencies = []
keywords = ["devices", "home-automation", "factory", "strategy", "id-generator"]
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
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
devicemanager = "devicemanager.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["devicemanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
