[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "threadlab"
version = "0.1.0"
description = "Small, runnable examples of classic concurrency patterns built on Python threads."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "threading",
    "concurrency",
    "mutex",
    "semaphore",
    "condition-variable",
    "producer-consumer",
    "dining-philosophers",
    "sleeping-barber",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
threadlab-fizzbuzz = "threadlab.fizzbuzz:main"
threadlab-bank = "threadlab.bank:main"
threadlab-logger = "threadlab.logger:main"
threadlab-philosophers = "threadlab.philosophers:main"
threadlab-producer-consumer = "threadlab.producer_consumer:main"
threadlab-barbershop = "threadlab.barbershop:main"
threadlab-demos = "threadlab.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["threadlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["threadlab"]
