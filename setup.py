from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="globeguess",
    version="0.1.0",
    author="Peter Cotton",
    author_email="",
    description="Country name resolution and suggestions for geography guessing games",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/globeguess",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        'globeguess.countries': ['data/*.yaml', 'data/*.parquet'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3.0",
        "rapidfuzz>=3.0.0",
        "pyarrow>=10.0.0",
        "requests>=2.25.0",
        "pyyaml>=6.0",
        "pycountry>=22.3.5",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
