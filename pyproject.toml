[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursus"
version = "0.1.0"
description = "A small interactive shell, a dining-philosophers simulation and a set of polymorphic animal demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "minishell", "dining-philosophers", "threads", "polymorphism"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minishell = "cursus.shell.repl:main"
philo = "cursus.philo.cli:main"
animals = "cursus.animals.basic:main"
animals-thinking = "cursus.animals.thinking:main"
animals-abstract = "cursus.animals.abstract:main"

[tool.hatch.build.targets.wheel]
packages = ["cursus"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
