"""Setup script for the Flockwave MAC address package."""

from setuptools import setup, find_namespace_packages

requires = ["attrs>=19.3.0"]

__version__ = None
exec(open("src/flockwave/mac/version.py").read())

setup(
    name="flockwave-mac",
    version=__version__,
    author="Tamás Nepusz",
    author_email="tamas@collmot.com",
    packages=find_namespace_packages("src", include=["flockwave.*"]),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=requires,
    extras_require={"test": ["pytest>=6.0"]},
    test_suite="test",
)
