"""cleanpg: read a web page and re-render it as plain, human-readable HTML.

The output layout differs from the original page designer's. Rendered
documents are not meant for re-publishing or for circumventing content
protection.
"""

from cleanpg.core.models import RenderConfig
from cleanpg.render import RenderError, clean_html

__version__ = "0.1.0"

__all__ = ["RenderConfig", "RenderError", "clean_html"]
