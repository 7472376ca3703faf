"""Setup script for the python-conventions tutorials package."""
from setuptools import setup, find_namespace_packages

setup(
    name="python-conventions-tutorials",
    version="1.0.0",
    description="Tutorials on Python conventions for training scripts, with runnable examples and docs checks",
    author="Craftsman Developer",
    packages=find_namespace_packages(include=["src", "src.*"]),
    py_modules=["main"],
    python_requires=">=3.11",
    install_requires=[
        "torch>=2.0.0",
        "pytorch-lightning>=2.0.0",
        "wandb>=0.16.0",
        "pydantic>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=6.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pyconv-docs=main:main",
        ],
    },
)
