[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "httpkit"
version = "1.11.2"
description = "Building blocks for HTTP clients: request option values, header and cookie parsing, timeouts, a response record and a resizable thread pool."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "cookies", "headers", "thread-pool", "multipart", "timeout"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["httpkit"]

[tool.pytest.ini_options]
addopts = "-ra"
