[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prodband"
version = "0.1.0"
description = "A turn-based terminal game where a band of developers tries to survive PRODUCTION"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "turn-based", "terminal", "functional", "heap", "leaderboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
prodband = "prodband.cli:main"
prodband-fp = "prodband.fp:main"

[tool.hatch.build.targets.wheel]
packages = ["prodband"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
