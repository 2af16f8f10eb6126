import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

import reqform  # noqa: E402

project = "Reqform"
copyright = "2026, Reqform contributors"
author = "Reqform contributors"
release = reqform.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

source_suffix = {".md": "markdown"}
root_doc = "index"
exclude_patterns = ["_build"]

# api.md sections are linked by anchor
myst_heading_anchors = 2

# urllib.parse and io show up in signatures and docstrings
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Google-style docstrings only
napoleon_google_docstring = True
napoleon_numpy_docstring = False

# Public names are re-exported from reqform, reqform.http and reqform.client
suppress_warnings = ["ref.python"]

autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}
# Constructor arguments are documented in the class docstring
autodoc_class_content = "class"
autodoc_member_order = "bysource"
autodoc_typehints = "description"

html_theme = "furo"
html_title = f"Reqform {release}"
