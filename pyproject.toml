[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "promptsh"
version = "1.0.0"
description = "A small command shell with cd, env, setenv, unsetenv, help and exit builtins"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "interpreter", "repl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
promptsh = "promptsh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["promptsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
