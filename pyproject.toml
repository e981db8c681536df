[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kensaku"
version = "1.0.0"
description = "A small system information fetcher with fractal ASCII art"
requires-python = ">=3.11"
keywords = ["fetch", "system-information", "terminal", "fractal", "ascii-art"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
    "psutil",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kensaku = "kensaku.output:main"

[tool.hatch.build.targets.wheel]
packages = ["kensaku"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
