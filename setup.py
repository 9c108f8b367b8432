from pathlib import Path
from setuptools import setup, find_packages


BASE_DIR = Path(__file__).parent
with open(BASE_DIR / "dcmdump" / "_version.py") as f:
    exec(f.read())

with open(BASE_DIR / 'README.md') as f:
    long_description = f.read()


setup(
    name="dcmdump",
    version=__version__,  # noqa: F821
    author="dcmdump authors",
    description="List the data elements of DICOM files, byte by byte",
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="MIT",
    keywords="dicom python medical imaging dump",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Developers",
        "Intended Audience :: Healthcare Industry",
        "Intended Audience :: Science/Research",
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
        "Topic :: Software Development :: Libraries"
    ],
    packages=find_packages(),
    package_data={
        'dcmdump': ['py.typed'],
    },
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.10',
    install_requires=[],
    extras_require={
        "tests": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": ["dcmdump=dcmdump.cli.main:main"],
        "dcmdump_subcommands": [
            "show = dcmdump.cli.show:add_subparser",
            "lookup = dcmdump.cli.lookup:add_subparser",
            "scan = dcmdump.cli.scan:add_subparser"
        ],
    },
)
