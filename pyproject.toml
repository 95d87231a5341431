[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elexbill"
version = "0.1.0"
description = "Electricity billing records: meter readings, charges, balances and a menu-driven console."
requires-python = ">=3.10"
dependencies = []
keywords = ["electricity", "billing", "utility", "meter", "accounting"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
elexbill = "elexbill.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["elexbill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
