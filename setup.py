from setuptools import find_packages, setup

setup(
    name="hpermute",
    version="0.1.0",
    packages=find_packages(),
    python_requires=">=3.10",
    install_requires=["loguru"],
    extras_require={"test": ["pytest"]},
)
