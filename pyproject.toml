[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katarunner"
version = "0.3.1"
description = "Runner and checker for a set of macro exercises, with worked examples of each kata."
requires-python = ">=3.10"
dependencies = []
keywords = ["kata", "exercises", "macros", "learning", "cargo", "diff"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
katarunner = "katarunner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["katarunner"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
