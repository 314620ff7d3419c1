"""Base exception for the gmi2md package.

Every application-level error derives from Gmi2mdError so callers can
catch anything raised by the tool with a single except clause.
"""


class Gmi2mdError(Exception):
    """Base exception for all gmi2md errors."""
    pass
