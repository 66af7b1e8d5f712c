[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "bankdesk"
version = "0.1.0"
description = "A small in-memory bank desk: admins, customers, accounts and card-to-card transfers."
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "card transfer", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bankdesk = "bankdesk.cli:main"

[tool.setuptools.packages.find]
include = ["bankdesk*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
