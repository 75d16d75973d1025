[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proxdash"
version = "0.1.0"
description = "A small web dashboard giving an overview of Proxmox clusters, nodes, virtual machines and LXC containers"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["proxmox", "dashboard", "monitoring", "virtualization", "lxc", "htmx", "wsgi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
proxdash = "proxdash.app:main"

[tool.hatch.build.targets.wheel]
packages = ["proxdash"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
