# Configuration file for the Sphinx documentation builder.
#
# For the full list of options see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import logging
import os
import sys
from datetime import datetime

# -- Path setup --------------------------------------------------------------

sys.path.insert(0, os.path.abspath("../../"))

from instgeom import VERSION, VERSION_SHORT  # noqa: E402

# -- Project information -----------------------------------------------------

project = "instgeom"
copyright = f"{datetime.today().year}, the instgeom developers"
author = "the instgeom developers"
version = VERSION_SHORT
release = VERSION

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx_math_dollar",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx.ext.viewcode",
    "sphinx_autodoc_typehints",
]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "jax": ("https://jax.readthedocs.io/en/latest/", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
}

exclude_patterns = ["_build"]

html_theme = "pydata_sphinx_theme"
html_title = f"instgeom v{VERSION}"

# -- sphinx.ext.autodoc
autosummary_ignore_module_all = False
autosummary_imported_members = True
autodoc_typehints_format = "short"
autodoc_default_options = {
    "show-inheritance": True,
}
autosummary_generate = True

# sphinx_autodoc_typehints
typehints_defaults = "comma"

# -- sphinx.ext.mathjax
# macros used in the docstrings
mathjax3_config = {
    "loader": {"load": ["[tex]/ams"]},
    "tex": {
        "macros": {
            "bm": [r"\boldsymbol{#1}", 1],
            "vec": [r"\mathbf{#1}", 1],
            "matr": [r"\bm{\mathit{#1}}", 1],
            "abs": [r"\lvert #1 \rvert", 1],
        }
    },
}

# -- sphinx.ext.napoleon
napoleon_numpy_docstring = True
napoleon_use_rtype = False
napoleon_preprocess_types = True
typehints_use_rtype = False


# from __future__ annotations leaves forward references sphinx_autodoc_typehints can't resolve
class ForwardReferenceFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return "Cannot resolve forward reference" not in record.msg


logging.getLogger("sphinx.sphinx_autodoc_typehints").addFilter(ForwardReferenceFilter())
