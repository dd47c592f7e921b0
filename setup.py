from setuptools import setup, find_packages

setup(
      name        = 'folding',
      version     = '1.0.0',
      description = 'Composable strict left folds that combine into single-pass aggregations.',
      license     = 'MIT',
      packages    = find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
      python_requires = '>=3.8',
      install_requires = [
          'toolz >= 0.12.0',
          'marshmallow >= 3.13.0',
          'configargparse >= 1.5',
          'pystache >= 0.6.0'
      ],
      extras_require = {
          'test': ['pytest >= 7.0'],
          'typecheck': ['mypy >= 1.0']
      },
      entry_points = {
          'console_scripts': ['folding-summary = folding.cli:run']
      }
)
