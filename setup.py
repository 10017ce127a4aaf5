from setuptools import setup, find_packages
from os import path

setup_dir = path.abspath(path.dirname(__file__))
with open(path.join(setup_dir, 'README.md'),
          encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name="weyl_tools",
    version="0.1",
    packages=find_packages(include=["weyl_tools", "weyl_tools.*"]),
    include_package_data=True,

    install_requires=[
        "numpy>=1.22",
        "scipy"
    ],

    extras_require={
        "test": ["pytest"]
    },

    license="MIT",
    description="""Some tools for working with Weyl groups: reduced words
    in normal form, the Bruhat order, and Weyl orbits of weights""",

    long_description=long_description,
    long_description_content_type="text/markdown"
)
