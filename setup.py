from setuptools import find_packages, setup


setup(
    name="annostrip",
    version="0.1.0",
    description="Comment, docstring and appendix stripper for LaTeX, Python and Markdown sources",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["annostrip = annostrip.cli:main"]},
)
