#! /usr/bin/env python

from setuptools import setup

MAJOR, MINOR, MICRO = 0, 1, 0
DEV_ITER = 0
DEV = True

if DEV:
    VERSION = "{}.{}.dev{}".format(MAJOR, MINOR, DEV_ITER)
else:
    VERSION = "{}.{}.{}".format(MAJOR, MINOR, MICRO)

setup(
    name="pykohler",
    description="pykohler: κ-Kohler hygroscopicity solver",
    long_description="""
        This code solves the single-parameter κ-Kohler equations relating an
        aerosol particle's hygroscopicity, its critical diameter, and the
        supersaturation at which it activates into a cloud droplet. Any one of
        these can be computed from the other two in closed form, and the
        maximum supersaturation along a particle's full Kohler curve can be
        found by numerical search.
    """,
    license="New BSD (3-clause)",
    version=VERSION,
    install_requires=[
        "numpy",
        "pandas",
        "pyyaml",
        "scipy>=1.7",
    ],
    extras_require={
        "test": ["pytest"],
    },
    packages=["pykohler", "pykohler.scripts", "pykohler.test"],
    entry_points={
        "console_scripts": ["run_kohler=pykohler.scripts.run_kohler:run_kohler"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: Unix",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
    ],
)
