[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchstats"
version = "0.1.0"
description = "Statistics for benchmark measurements: bootstrap resampling, percentiles, kernel density estimation, regression through the origin and Tukey outlier classification"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "statistics", "bootstrap", "kde", "outliers", "percentiles", "regression"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["benchstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
