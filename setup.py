from setuptools import setup, find_packages

# defines __version__
exec(open("hyperplug/_version.py").read())

setup(
    name="hyperplug",
    version=__version__,
    description=
        "An ordered, case-insensitive, multi-valued HTTP header collection",
    long_description=open("README.rst").read(),
    license="Apache-2.0",
    packages=find_packages(exclude=["hyperplug.tests"]),
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Internet :: WWW/HTTP",
    ],
)
