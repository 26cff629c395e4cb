################################################################################
#
#  Copyright (C) 2021-2024 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

import setuptools


PACKAGE_NAME: str = "fixed_linalg"

setuptools.setup(
    name=PACKAGE_NAME,
    version="0.1.0",
    author="Garrett Brown",
    maintainer="Garrett Brown",
    description="Fixed-dimension dense matrices and vectors",
    url="https://github.com/eigendude/OASIS",
    license="Apache-2.0",
    zip_safe=True,
    keywords=[
        "linear algebra",
    ],
    classifiers=[
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Topic :: Scientific/Engineering",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    packages=setuptools.find_packages(exclude=["test", "test.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "setuptools",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
