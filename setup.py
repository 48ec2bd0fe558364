import os
import sys

try:
    import setuptools
except ImportError:
    sys.exit("setuptools package not found. "
             "Please use 'pip install setuptools' first")

from setuptools import setup

# Make sure we're running from the setup.py directory.
script_dir = os.path.dirname(os.path.realpath(__file__))
if script_dir != os.getcwd():
    os.chdir(script_dir)

from deadends.__version__ import __version__


setup(name='gfa-dead-end-counter',
      version=__version__,
      description='Count the dead ends (unconnected segment extremities) in a GFA assembly graph',
      license='GPL-3.0-or-later',
      packages=['deadends', 'deadends.gfa_operations', 'deadends.analysis'],
      python_requires='>=3.8',
      install_requires=['gfapy'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['deadends = deadends.main:main']},
      )
