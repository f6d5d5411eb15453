#!/usr/bin/env python3

from setuptools import setup
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="fontgen",
        packages=["fontgen", "fontgen.atlas", "fontgen.formats"],
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Convert TrueType/OpenType fonts into bitmap font atlases",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["font", "atlas", "bitmap", "freetype"],
        classifiers=[],
        include_package_data=True,
        install_requires=[
            "numpy",
            "Pillow>=9.0",
            "freetype-py>=2.3",
        ],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "console_scripts": [
                "fontgen=fontgen.__main__:main",
            ],
        },
        zip_safe=False,
    )
