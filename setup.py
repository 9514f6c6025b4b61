"""
Setup file.
"""

import os

from setuptools import find_packages, setup

URL = "https://github.com/jarsmith/jarsmith"
KEYWORDS = "java jar dex classpath build planner android blueprint"
HERE = os.path.dirname(os.path.abspath(__file__))


if __name__ == "__main__":
    setup(
        name="jarsmith",
        version="0.1.0",
        description="Build planner for Java library, binary and prebuilt modules",
        keywords=KEYWORDS,
        url=URL,
        python_requires=">=3.8",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=[],
        extras_require={
            "test": ["pytest>=7.0"],
        },
        entry_points={
            "console_scripts": [
                "jarsmith=jarsmith.cli:main",
            ],
        },
        include_package_data=True)
