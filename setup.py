import setuptools
from setuptools import find_packages

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='rangekit',
    version='0.1',
    author='rangekit contributors',
    description='interval relation classification, matching and nearest-match search',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(where=".", include=["rangekit", "rangekit.*"]),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pandas',
    ],
    extras_require=dict(tests=["pytest", "hypothesis"]),
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Operating System :: OS Independent',
        ],
    )
