# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html


import os
import sys
import importlib.metadata

sys.path.insert(0, os.path.abspath('../src'))

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

project = 'bytesift'
copyright = '2026, bytesift contributors'
author = 'bytesift contributors'
release = "unknown"

try:
    release = importlib.metadata.version('bytesift')
except importlib.metadata.PackageNotFoundError:
    print("WARNING: bytesift package not found. Is it installed in editable mode?")

version = release

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

extensions = [
    'sphinx.ext.autodoc',      # Reads the docstrings
    'sphinx.ext.napoleon',     # Parses Google style
    'sphinx.ext.viewcode',     # Adds links to source code
    'sphinx.ext.intersphinx',  # Links to the python and numpy docs
]

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
}

napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = False

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']


# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = 'sphinx_rtd_theme'
