[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imgservice"
version = "0.1.0"
description = "A small HTTP service that stores uploaded images and returns grayscale, resized or blurred versions"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["http", "server", "image", "grayscale", "resize", "blur"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
imgservice = "imgservice.server:main"

[tool.hatch.build.targets.wheel]
packages = ["imgservice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
