[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sitecrawler"
version = "1.0.0"
description = "A command-line tool that crawls a website and builds a site map"
requires-python = ">=3.10"
dependencies = []
keywords = ["crawler", "sitemap", "web", "spider", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sitecrawler = "sitecrawler.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sitecrawler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
