#!/usr/bin/env python

from setuptools import setup, find_packages

with open('requirements.txt') as f:
    requirements = f.read().splitlines()

setup(name='tunnelcore',
      version='0.4',
      description='Secure randomness, jitter, compression and sizing helpers for tunnel clients',
      install_requires=requirements,
      extras_require={'test': ['pytest']},
      packages=find_packages(),
      package_data={'tunnelcore': ['config_default.yaml']},
      scripts = ['tunnel_util.py'],

	  classifiers=[
		  'Development Status :: 4 - Beta',
		  'Environment :: Console',
		  'Intended Audience :: Developers',
		  'License :: OSI Approved :: GNU Affero General Public License v3',
		  'Operating System :: POSIX :: Linux',
		  'Programming Language :: Python :: 3',
		  'Topic :: Security',
		  ],
     )
