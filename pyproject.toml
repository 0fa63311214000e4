[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simple_pgw"
version = "0.1.0"
description = "A minimal PDN gateway model: control-plane session state and data-plane packet forwarding."
requires-python = ">=3.10"
dependencies = []
keywords = ["pgw", "gtp", "epc", "lte", "bearer", "pdn", "telecom"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Telephony",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["simple_pgw"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
