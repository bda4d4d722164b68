import os

from setuptools import find_packages, setup

setup(
    name="validy",
    version="0.1.0",
    packages=find_packages(include=["validy", "validy.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.0",
        ],
    },
    author="Validy Contributors",
    description="Composable, path-aware validation rules for already-typed values",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
