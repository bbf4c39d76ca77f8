[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cookbook"
version = "0.1.0"
description = "Small command-line tools and helper libraries: line counting, echo, text statistics, unit conversion, bzip2 compression, URL fetching, small web servers, fractal images and deep equality."
requires-python = ">=3.10"
keywords = [
    "cli",
    "utilities",
    "temperature",
    "units",
    "bzip2",
    "mandelbrot",
    "palindrome",
    "deep-equality",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]
dependencies = [
    "pillow",
    "jinja2",
    "markupsafe",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cookbook-textfmt = "cookbook.textfmt:main"
cookbook-echo = "cookbook.echo:main"
cookbook-dup = "cookbook.dup:main"
cookbook-dedup = "cookbook.textstats:dedup_main"
cookbook-wordfreq = "cookbook.textstats:wordfreq_main"
cookbook-charcount = "cookbook.charcount:main"
cookbook-graph = "cookbook.graph:main"
cookbook-netflag = "cookbook.netflag:main"
cookbook-tempconv = "cookbook.tempconv:main"
cookbook-units = "cookbook.units:main"
cookbook-bzip = "cookbook.bzip:main"
cookbook-fetch = "cookbook.fetch:main"
cookbook-fetchall = "cookbook.fetch:fetchall_main"
cookbook-autoescape = "cookbook.autoescape:main"
cookbook-server = "cookbook.server:main"
cookbook-mandelbrot = "cookbook.mandelbrot:main"
cookbook-jpeg = "cookbook.jpeg:main"

[tool.hatch.build.targets.wheel]
packages = ["cookbook"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
