[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gpupixel"
version = "0.1.0"
description = "Image-pipeline building blocks: small matrices and vectors, task queues, rotation rules and frame sources with targets."
requires-python = ">=3.10"
dependencies = []
keywords = ["image", "pipeline", "matrix", "vector", "rotation", "dispatch queue", "camera"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gpupixel"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
