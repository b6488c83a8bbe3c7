from setuptools import setup, find_packages

setup(
    name="textstore",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        'click>=8.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'textstore=textstore.main:cli',
        ],
    },
)
