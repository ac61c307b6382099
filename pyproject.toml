[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "textstack"
version = "0.1.0"
description = "Incremental text and markup builder with indentation-aware scopes and string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "template", "html", "builder", "string", "indentation"]
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
    "Topic :: Text Processing :: General",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["textstack"]

[tool.pytest.ini_options]
addopts = "-ra"
