# setup.py
from setuptools import setup, find_packages

setup(
    name="risp",
    version="0.1.0",
    description="Reader and evaluator core of a minimal Lisp-family interactive language",
    packages=find_packages(include=["risp", "risp.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["risp=risp.repl:main"],
    },
    zip_safe=False,
)
