[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minishell-core"
version = "0.1.0"
description = "Core pieces of a small shell: operator tokens, a command-tree parser, an environment map and SIGINT handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "ast", "environment", "tokens", "signals"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minishell_core"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
