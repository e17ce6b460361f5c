#!/usr/bin/env python
from setuptools import setup, find_packages

CLASSIFIERS = [
    'Development Status :: 5 - Production/Stable',
    'Environment :: Console',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: MIT License',
    'Natural Language :: English',
    'Operating System :: POSIX',
    'Programming Language :: Python :: 3',
    'Topic :: Software Development :: Testing'
]

KEYWORDS = 'XCTest XCTAssertEqual wdiff colordiff'


setup(name = 'xctwdiff',
    version = '1.0.0',
    description = """Word diff of the values in an XCTAssertEqual failure message""",
    packages = find_packages(),
    classifiers = CLASSIFIERS,
    keywords = KEYWORDS,
    zip_safe = False,
    python_requires = '>=3.6',
    install_requires = ['invoke>=1.4'],
    extras_require = {'test': ['pytest']},
    entry_points = {'console_scripts': ['xctwdiff = xctwdiff.cli:main']},
)
