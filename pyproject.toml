[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gqlcore"
version = "0.1.0"
description = "GraphQL building blocks: syntax tree types, literal values, query errors, directive interfaces and sample resolvers."
requires-python = ">=3.10"
dependencies = []
keywords = ["graphql", "ast", "schema", "resolver", "directives"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gqlcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
