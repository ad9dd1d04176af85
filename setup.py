from setuptools import setup, find_packages

setup(
    name="connect4-rules",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["run"],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "gymnasium",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
