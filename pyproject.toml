[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nibblecipher"
version = "0.1.0"
description = "A toy 32-bit block cipher built from key-seeded nibble substitution and permutation rounds"
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "block-cipher", "s-box", "permutation", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nibblecipher = "nibblecipher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nibblecipher"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
