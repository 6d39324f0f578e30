# setup.py
from setuptools import setup, find_packages

setup(
    name="parsley",
    version="0.1.0",
    description="An embeddable Scheme evaluation engine",
    packages=find_packages(include=["parsley", "parsley.*"]),
    package_data={"parsley": ["prelude/*.scm"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
