[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simpleoneapi"
version = "0.1.0"
description = "Building blocks for putting many chat-model providers behind one OpenAI-compatible API."
requires-python = ">=3.10"
keywords = [
    "openai",
    "llm",
    "chat-completions",
    "gemini",
    "ollama",
    "qianfan",
    "minimax",
    "coze",
    "server-sent-events",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Proxy Servers",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "httpx>=0.24",
    "starlette>=0.27",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.21",
    "respx>=0.20",
]

[tool.hatch.build.targets.wheel]
packages = ["simpleoneapi"]

[tool.hatch.build.targets.sdist]
include = ["simpleoneapi", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
