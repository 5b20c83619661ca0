[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bongocat"
version = "0.1.0"
description = "An always-on-top cat that taps along with every key you press and keeps a persistent count"
requires-python = ">=3.10"
dependencies = []
keywords = ["bongo-cat", "overlay", "keyboard", "counter", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bongocat = "bongocat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bongocat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
