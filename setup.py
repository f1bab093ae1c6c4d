#!/usr/bin/env python

from setuptools import setup, find_packages

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

setup(name='simple_std',
      version='0.1',
      description='Console input and random number helpers for beginner exercises',
      install_requires=requirements,
      extras_require={
          'test': ['pytest'],
          },
      packages=find_packages(include=['simple_std', 'simple_std.*']),
      package_data={'simple_std': ['config_default.yaml']},
      scripts = ['simple_std_guess.py'],

	  classifiers=[
		  'Development Status :: 4 - Beta',
		  'Environment :: Console',
		  'Intended Audience :: Education',
		  'License :: OSI Approved :: GNU Affero General Public License v3',
		  'Operating System :: OS Independent',
		  'Programming Language :: Python :: 3',
		  'Topic :: Education',
		  ],
     )
