import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "Reqtarget"
copyright = "2026, Reqtarget contributors"
author = "Reqtarget contributors"
import reqtarget

release = reqtarget.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Re-exports from reqtarget and reqtarget.http document the same objects twice.
suppress_warnings = ["ref.python"]

autodoc_default_options = {
    "members": True,
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "Reqtarget"
