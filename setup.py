# This file is part of Treeshrink.
#
# Copyright the Treeshrink Authors.
# Individual contributors are listed in the git log.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

import sys
from pathlib import Path

import setuptools

if sys.version_info[:2] < (3, 9):  # "unreachable" sanity check
    raise Exception(
        "You are trying to install Treeshrink using Python "
        "%s, but it requires Python 3.9 or later." % (sys.version.split()[0],)
    )


def local_file(name):
    return Path(__file__).absolute().parent.joinpath(name).relative_to(Path.cwd())


SOURCE = str(local_file("src"))

# Assignment to placate pyflakes. The actual version is from the exec that follows.
__version__ = None
exec(local_file("src/treeshrink/version.py").read_text(encoding="utf-8"))
assert __version__ is not None


extras = {
    "test": ["pytest>=4.6", "hypothesis>=6.0"],
}

extras["all"] = sorted(set(sum(extras.values(), [])))


setuptools.setup(
    name="treeshrink",
    version=__version__,
    author="The Treeshrink Authors",
    packages=setuptools.find_packages(SOURCE),
    package_dir={"": SOURCE},
    license="MPL-2.0",
    description="Value generation and shrinking for property-based testing",
    zip_safe=False,
    extras_require=extras,
    install_requires=[
        "attrs>=22.2.0",
        "sortedcontainers>=2.1.0,<3.0.0",
    ],
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Testing",
    ],
    long_description=local_file("README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    keywords="python testing property-based-testing shrinking",
)
