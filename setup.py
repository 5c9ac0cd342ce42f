from setuptools import setup, find_packages

setup(
    name='roboimport-js',
    version='0.1.0',
    py_modules=['roboimport'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'roboimport = roboimport:main',
        ],
    },
)
