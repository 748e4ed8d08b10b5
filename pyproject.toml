[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serialkin"
version = "0.1.0"
description = "Forward kinematics and geometric Jacobians for serial-link robots described by Denavit-Hartenberg parameters"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["robotics", "kinematics", "denavit-hartenberg", "jacobian", "manipulator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
]

[tool.hatch.build.targets.wheel]
packages = ["serialkin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
