[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kinki"
version = "0.1.0"
description = "A small vertical bullet shooter built on pygame"
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "pygame", "bullet-hell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kinki = "kinki.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kinki"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
