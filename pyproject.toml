[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dojoforge"
version = "0.1.0"
description = "Build-side helpers for Dojo world projects: namespaces, contract selectors, manifests, artifacts, configuration and a rebuild watcher."
requires-python = ">=3.11"
keywords = ["dojo", "cairo", "starknet", "compiler", "manifest", "namespace"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]
dependencies = [
    "tomli-w>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["dojoforge"]

[tool.hatch.build.targets.sdist]
include = ["dojoforge", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
strict = true
