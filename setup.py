import pathlib
import sys

from setuptools import find_packages, setup


__copyright__ = "Copyright 2026, The phylipdist Project"
__license__ = "BSD-3"
__version__ = "2026.10.16a1"
__status__ = "Production"

# Check Python version, no point installing if unsupported version inplace
min_version = (3, 8)
if sys.version_info < min_version:
    py_version = ".".join(str(n) for n in sys.version_info)
    msg = (
        f"Python-{'.'.join(map(str, min_version))} or greater is required, "
        f"Python-{py_version} used."
    )
    raise RuntimeError(msg)


short_description = "Read, write and edit PHYLIP distance matrices"

readme_path = pathlib.Path(__file__).parent / "README.md"

long_description = readme_path.read_text()


PACKAGE_DIR = "src"

setup(
    name="phylipdist",
    version=__version__,
    description=short_description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms=["any"],
    license=__license__,
    keywords=[
        "biology",
        "phylogeny",
        "phylip",
        "distance matrix",
        "bioinformatics",
    ],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
    ],
    packages=find_packages(where="src"),
    package_dir={"": PACKAGE_DIR},
    python_requires=">=3.8",
    install_requires=[
        "chardet",
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest>=4.3.0",
            "pytest-cov",
        ],
        "dev": [
            "black",
            "isort",
            "nox",
            "pytest",
            "pytest-cov",
        ],
    },
)
