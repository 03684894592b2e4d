from setuptools import setup, find_packages
from os import path


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()


setup(
    name='msprefixspan',
    version='1.0.0',
    description='The Python project that implements the Minimum Support PrefixSpan algorithm',
    long_description=long_description,
    license='GNU',
    classifiers=['License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
                 'Programming Language :: Python :: 3'],
    packages=find_packages(exclude=['contrib', 'docs', 'tests']),
    install_requires=['pandas', 'numpy'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['msprefixspan=msprefixspan.Main:main']},
    python_requires='>=3.7',
)
