"""
Search collaborators: parameters, results and an HTTP client for a Solr index.
"""

from .params import SearchParams, escape_value
from .results import Record, SearchResults, ResultsManager
from .client import SolrSearchClient

__all__ = [
    'SearchParams',
    'escape_value',
    'Record',
    'SearchResults',
    'ResultsManager',
    'SolrSearchClient'
]
