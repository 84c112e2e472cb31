"""Reporters for stratification results.

PlainTextReporter and JSONReporter use stdlib only, RichReporter uses rich.
"""

from stratigraph.application.reporters._base import BaseReporter
from stratigraph.application.reporters.json_reporter import JSONReporter
from stratigraph.application.reporters.plain_text import PlainTextReporter
from stratigraph.application.reporters.rich_reporter import RichReporter

__all__ = [
    "BaseReporter",
    "JSONReporter",
    "PlainTextReporter",
    "RichReporter",
]
