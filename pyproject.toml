[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visionfilters"
version = "0.1.0"
description = "Image filters on BGR numpy arrays (grayscale variants, sepia, blurs, Sobel edges, quantization, cartoon and sketch), plus face-box drawing, depth-map helpers and a key-driven filter pipeline"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["image processing", "filters", "sobel", "blur", "sepia", "bilateral", "depth map"]
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
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
visionfilters-timeblur = "visionfilters.timing:main"

[tool.hatch.build.targets.wheel]
packages = ["visionfilters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
