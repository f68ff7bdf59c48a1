[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Small cryptanalysis exercises: many-time pad, AES modes, chained hashing, padding oracle, discrete log and weak RSA factoring"
requires-python = ">=3.10"
keywords = ["cryptography", "cryptanalysis", "aes", "rsa", "padding-oracle", "discrete-log"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cryptolab-manytimepad = "cryptolab.manytimepad:main"
cryptolab-aes = "cryptolab.aesmodes:main"
cryptolab-chainhash = "cryptolab.chainhash:main"
cryptolab-paddingoracle = "cryptolab.paddingoracle:main"
cryptolab-dlog = "cryptolab.dlog:main"
cryptolab-rsabreak = "cryptolab.rsabreak:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
