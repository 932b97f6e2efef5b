import os

import setuptools

# Make sure that README.md decodes in environments that use the C locale
# (which implies ASCII), by explicitly giving the encoding.
with open(os.path.join(os.path.dirname(__file__), "README.md"), encoding="utf-8") as f:
    long_description = f.read()


setuptools.setup(
    name="colorlib",
    # MAJOR.MINOR.PATCH, per http://semver.org
    version="1.0.0",
    description="ANSI escape strings with deferred cleanup and terminal restore",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="colorlib contributors",
    keywords="ansi, terminal, color, escape-sequences, cursor",
    license="ISC",
    py_modules=(
        "colorlib",
        "colortest",
    ),
    entry_points={
        "console_scripts": ("colortest = colortest:main",)
    },
    extras_require={
        "test": ("pytest",),
    },
    python_requires=">=3.6",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Topic :: Terminals",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Operating System :: POSIX",
        "Operating System :: Microsoft :: Windows",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.6",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
)
