"""
Keyword responder
Canned responses for recognised keywords, random defaults otherwise.
"""

from responder.defaults import FALLBACK_RESPONSE, DefaultResponseLoader
from responder.issues import IssueKind, LoadIssue, LoadResult
from responder.responder import Responder
from responder.selector import ResponseSelector, Selection
from responder.table import ResponseTableLoader

__all__ = [
    'FALLBACK_RESPONSE', 'DefaultResponseLoader',
    'IssueKind', 'LoadIssue', 'LoadResult',
    'Responder',
    'ResponseSelector', 'Selection',
    'ResponseTableLoader',
]
