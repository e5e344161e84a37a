from setuptools import find_packages, setup

setup(
    name="twotrack",
    version="0.1.0dev1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    install_requires=["pandas"],
    extras_require={"test": ["pytest"]},
)
