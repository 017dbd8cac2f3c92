"""
Onepager - A single-page site builder.

Onepager reads a structured content document, renders it through an HTML
template (placeholder tokens or Jinja2), minifies the CSS, JavaScript and
generated HTML, and writes a deployable index.html plus a sitemap.
"""

__version__ = "1.0.0"
__author__ = "Onepager Contributors"

from .core import Onepager, AssetReport, BuildReport
from .exceptions import BuildError, ContentError, TemplateError
from .settings import BuildConfig, OnepagerSettings

__all__ = [
    'Onepager',
    'AssetReport',
    'BuildReport',
    'BuildConfig',
    'OnepagerSettings',
    'BuildError',
    'ContentError',
    'TemplateError',
]
