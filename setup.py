from setuptools import setup, find_packages

setup(
    name='pybalance',
    version='0.0.1',
    python_requires='>=3.10',
    install_requires=[
        'numpy',
        'pandas>=2',
        'consistent_df @ https://github.com/macxred/consistent_df/tarball/main'
    ],
    description=('Python package to compute filtered balance reports from an '
                 'account chart and a journal.'),
    long_description=open('README.md').read(),
    packages=find_packages(),
    extras_require={
        "test": [
            "pytest",
        ],
        "dev": [
            "pytest",
            "flake8",
            "bandit",
        ]
    }
)
