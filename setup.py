# setup.py
from setuptools import setup, find_packages

setup(
    name="linus",
    version="0.1.0",
    description="Tokenizer, parser and evaluator for the Linus expression language",
    packages=find_packages(include=["linus", "linus.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["linus=linus.cli:main"],
    },
    zip_safe=False,
)
