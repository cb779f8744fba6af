# Sphinx configuration for the osuparser API docs.

import os
import sys

sys.path.insert(0, os.path.abspath("../.."))

project = "osuparser"
copyright = "2023, osuparser contributors"
author = "osuparser contributors"

extensions = [
    "autoapi.extension",
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx_rtd_theme",
]

autoapi_type = "python"
autoapi_dirs = [
    "../../osuparser",
]
autoapi_options = [
    "members",
    "show-inheritance",
    "show-module-summary",
    "imported-members",
]
autodoc_typehints = "description"

templates_path = ["_templates"]
exclude_patterns = ["_build"]

html_theme = "sphinx_rtd_theme"
