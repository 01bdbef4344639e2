import setuptools

with open("README.md") as fh:
    long_description = fh.read()

setuptools.setup(
    name="term_justify",
    version="0.1.0",
    author="Shay Hill",
    author_email="shay_public@hotmail.com",
    description="Wrap and fully justify styled words for fixed-width terminals.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ShayHill/term_justify",
    package_dir={"": "src"},
    package_data={"term_justify": ["py.typed"]},
    packages=setuptools.find_packages(where="src"),
    install_requires=["lxml", "markdown-it-py", "svg-path-data"],
    extras_require={"test": ["pytest", "paragraphs"]},
    tests_require=["pytest", "paragraphs"],
    entry_points={"console_scripts": ["term_justify=term_justify.__main__:main"]},
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
