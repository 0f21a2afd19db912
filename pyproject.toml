[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "moneykit"
version = "1.0.0"
description = "Exact monetary amounts in minor units, with ISO 4217 currencies, formatting, splitting and allocation."
requires-python = ">=3.10"
dependencies = []
keywords = ["money", "currency", "iso4217", "finance", "formatting", "allocation"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["moneykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
