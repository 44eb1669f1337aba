# setup.py
from setuptools import setup, find_packages
import os

here = os.path.abspath(os.path.dirname(__file__))
version = {}
with open(os.path.join(here, "mexpr", "__init__.py"), encoding="utf-8") as f:
    for line in f:
        if line.startswith("__version__"):
            exec(line, version)

setup(
    name="mexpr",
    version=version.get("__version__", "0.1.0"),
    description="One-line arithmetic expressions over first-class, lifted operators",
    packages=find_packages(include=["mexpr", "mexpr.*", "mexpr_lsp", "mexpr_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "hypothesis>=6.80",
        ],
    },
    entry_points={
        "console_scripts": [
            "mexpr=mexpr.__main__:main",
            "mexpr-ls=mexpr_lsp.server:main",
        ],
    },
    zip_safe=False,
)
