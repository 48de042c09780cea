#!/usr/bin/env python
# vim: set fileencoding=utf-8 :

# I used the following resources to compile the packaging boilerplate:
# https://python-packaging.readthedocs.io/en/latest/
# https://packaging.python.org/distributing/#requirements-for-packaging-and-distributing

from setuptools import find_namespace_packages, setup


def readme():
    with open('README.md') as f:
        return f.read()


setup(name='order-statistics',
      version='1.0.0',
      description='A Python package for collecting attribute statistics from '
                  'directories of JSON order files in parallel.',
      long_description=readme(),
      long_description_content_type='text/markdown',
      license='MIT',
      classifiers=[
          # How mature is this project? Common values are
          #   3 - Alpha
          #   4 - Beta
          #   5 - Production/Stable
          'Development Status :: 4 - Beta',

          # Indicate who your project is intended for
          'Intended Audience :: Developers',
          'Topic :: Office/Business',
          'Topic :: Utilities',

          # Environment
          'Operating System :: POSIX :: Linux',
          'Environment :: Console',
          'Natural Language :: English',

          # Pick your license as you wish (should match "license" above)
          'License :: OSI Approved :: MIT License',

          # Specify the Python versions you support here. In particular, ensure
          # that you indicate whether you support Python 2, Python 3 or both.
          'Programming Language :: Python :: 3.10',
          'Programming Language :: Python :: 3.11',
          'Programming Language :: Python :: 3.12',
      ],
      keywords='statistics orders json threads',
      # No __init__.py in the package directory
      packages=find_namespace_packages(include=['order_stats']),
      python_requires='>=3.10',
      # Install the scripts
      scripts=[
          'scripts/order_statistics.py',
          'scripts/generate_orders.py',
      ],
      install_requires=[
          # Streaming the input JSON arrays
          'ijson',
          # The XML report
          'lxml',
          # Configuration files
          'PyYAML',
          # A progress bar
          'tqdm',
      ],
      extras_require={
          'test': ['pytest'],
      },
      zip_safe=False)
