from setuptools import setup, find_packages

setup(
    name="pagecomposer",
    version="0.1.0",
    description="Element-collection state engine for a drag-and-drop page builder",
    author="Vous",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "PyQt5>=5.15"
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Framework :: PyQt5"
    ],
)
