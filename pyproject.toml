[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vikingcase"
version = "0.2.0"
description = "Case conversion for identifiers and readable display names for Enum members"
requires-python = ">=3.10"
dependencies = []
keywords = ["enum", "case", "casing", "snake_case", "kebab-case", "display"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vikingcase = "vikingcase.display:main"

[tool.hatch.build.targets.wheel]
packages = ["vikingcase"]

[tool.pytest.ini_options]
addopts = "-ra"
