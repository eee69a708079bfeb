import re

from setuptools import setup, find_packages

with open("runstr/__init__.py") as f:
  version = re.search(r"__version__ = \"(.*)\"", f.read()).group(1)

setup(
  name              = "runstr",
  description       = "tiny embeddable scripting language",
  version           = version,
  author            = "Felix C. Stegerman",
  author_email      = "flx@obfusk.net",
  license           = "GPLv3+",
  classifiers       = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: Implementation :: CPython",
    "Programming Language :: Python :: Implementation :: PyPy",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Libraries",
  ],
  keywords          = "interpreter scripting language",
  packages          = find_packages(),
  entry_points      = { "console_scripts": ["runstr=runstr.__main__:main_"] },
  python_requires   = ">=3.8",
  install_requires  = ["pyparsing>=3.0", "regex"],
  extras_require    = { "test": ["coverage", "pytest"] },
)
