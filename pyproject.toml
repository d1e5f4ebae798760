[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "purplekit"
version = "0.1.0"
description = "Small utilities: cron expression parsing, UTC time helpers, .env loading, robots.txt handling and a JSON value model"
requires-python = ">=3.10"
dependencies = []
keywords = ["cron", "dotenv", "robots.txt", "json", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["purplekit"]

[tool.pytest.ini_options]
addopts = "-ra"
