[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "concurrex"
version = "0.1.0"
description = "Thread-based concurrency patterns: cancellable streams, fan-out pools, semaphores, rate limiting and a concurrent downloader."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = [
    "concurrency",
    "threads",
    "fan-out",
    "worker-pool",
    "semaphore",
    "rate-limiting",
    "generators",
]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
concurrex = "concurrex.cli:main"
concurrex-slice = "concurrex.dynslice:main"
concurrex-counter = "concurrex.counter:main"
concurrex-limiter = "concurrex.limiter:main"

[tool.hatch.build.targets.wheel]
packages = ["concurrex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
