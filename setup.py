from setuptools import setup, find_packages

setup(
    name='tldsplit',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'click>=8.1.0',
        'rich>=13.0.0',
        'pyyaml>=6.0',
        'aiohttp>=3.9.0',
    ],
    extras_require={
        'tests': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'tldsplit=tldsplit.cli:main',
        ],
    },
)
