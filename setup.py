#!/usr/bin/env python

from setuptools import setup, find_packages
from subprocess import Popen, PIPE
import sys
import os

def find_version():
    try:
        p = Popen('git describe --tags --match "v*.*"', stdout=PIPE, stderr=PIPE, shell=True)
        p.stderr.close()
        line = p.stdout.readlines()[0]
        line = line.decode().strip()
        if line.startswith('v'):
            line = line[1:]
            return line
    except Exception:
        pass
    
    # if we get here, git tags failed
    # attempt to read PKG-INFO
    try:
        with open("PKG-INFO") as f:
            for line in f.readlines():
                line = line.strip().split(": ")
                if line[0] == "Version":
                    return line[1]
    except Exception:
        pass
    
    # if we get HERE, nothing worked
    print("warning: git version or PKG-INFO file not found. using 0.1.0.dev0", file=sys.stderr)
    return "0.1.0.dev0"

# force this to run in the right directory
os.chdir(os.path.abspath(os.path.split(__file__)[0]))

setup(name='pygenerative',
      version=find_version(),
      description='property-based testing with shrinkable generator combinators',
      license='MIT',
      packages=find_packages(),
      python_requires='>=3.6',
      extras_require={
          'test': ['pytest'],
      },
)
