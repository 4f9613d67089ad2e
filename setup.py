"""
Setup file.
"""

import os

from setuptools import find_packages, setup

URL = "https://github.com/idlbridge/idlbridge"
KEYWORDS = "idl corba idlj jacorb compiler translator build"
HERE = os.path.dirname(os.path.abspath(__file__))


with open(os.path.join(HERE, "README.md"), encoding="utf-8") as readme:
    LONG_DESCRIPTION = readme.read()


if __name__ == "__main__":
    setup(
        name="idlbridge",
        version="0.1.0",
        description="Drives external IDL compilers and reports their outcome",
        long_description=LONG_DESCRIPTION,
        long_description_content_type="text/markdown",
        keywords=KEYWORDS,
        url=URL,
        python_requires=">=3.9",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=[
            "tqdm>=4.60",
        ],
        extras_require={
            "test": [
                "pytest>=7.0",
            ],
        },
        entry_points={
            "console_scripts": [
                "idlbridge=idlbridge.cli:main",
            ],
        },
        include_package_data=True)
