from setuptools import setup

setup(
    name="routefinder",
    version="0.1.0",
    description="Tool for finding the longest route between buildings",
    license="MIT",
    packages=["routefinder"],
    python_requires=">=3.7",
    install_requires=["Jinja2>=3", "PyYAML>=5.1"],
    extras_require={"test": ["pytest"]},
    package_data={"routefinder": ["templates/*.jinja"]},
    entry_points={"console_scripts": ["routefinder = routefinder.cli:main"]},
)
