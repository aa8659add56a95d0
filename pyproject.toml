[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cybergod"
version = "0.1.0"
description = "Security toolkit library: signature lookups, UPX detection, USB and autorun scanning, duplicate finding, file recovery and secure deletion"
requires-python = ">=3.10"
dependencies = ["psutil"]
keywords = ["security", "malware", "signatures", "upx", "duplicates", "recovery", "shredder", "autorun", "usb"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Recovery Tools",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cybergod"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
