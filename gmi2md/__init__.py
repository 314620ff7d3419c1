"""gmi2md - Gemtext to Markdown converter.

Converts documents written in Gemtext (the line-oriented markup used by the
Gemini protocol) into Markdown suitable for Markdown-consuming tools.
"""

__version__ = "0.1.0"
