[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spfroute"
version = "0.1.0"
description = "Shortest-path-first route calculation over an IPv4 link-state adjacency graph"
requires-python = ">=3.10"
dependencies = []
keywords = ["ospf", "dijkstra", "spf", "routing", "ipv4", "ecmp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spfroute = "spfroute.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["spfroute"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
