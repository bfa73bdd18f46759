"""
Pytest configuration and shared fixtures.
"""

import pytest
import requests
from pathlib import Path
from unittest.mock import Mock

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from facetchannels.models import ProviderOptions
from facetchannels.search import SearchParams


class FakeIndex:
    """
    In-memory stand-in for a search backend.
    
    ``hits`` maps a filter expression to the documents a search filtered on
    it returns. Every executed search is recorded in ``calls``.
    """
    
    def __init__(self, hits=None, facet_fields=None):
        self.hits = hits or {}
        self.facet_fields = facet_fields or {}
        self.calls = []
    
    def select(self, params):
        self.calls.append(params)
        docs = []
        for fq in params.get('fq', []):
            docs = self.hits.get(fq, [])
        return {
            'response': {'numFound': len(docs), 'docs': docs},
            'facet_counts': {'facet_fields': self.facet_fields}
        }


class FakeResults:
    """Minimal result set that tracks its own filters and returns canned records."""
    
    def __init__(self, records_by_filter=None, facet_list=None, failing_filters=()):
        self.records_by_filter = records_by_filter if records_by_filter is not None else {}
        self.facet_list = facet_list or {}
        self.failing_filters = failing_filters
        self.params = SearchParams()
        self.executed_filters = []
        self._results = []
    
    def duplicate(self):
        copy = FakeResults(self.records_by_filter, self.facet_list, self.failing_filters)
        copy.executed_filters = self.executed_filters
        for expression in self.params.get_filters():
            copy.params.add_filter(expression)
        return copy
    
    def get_params(self):
        return self.params
    
    def perform_and_process_search(self):
        filters = self.params.get_filters()
        self.executed_filters.append(filters[-1] if filters else None)
        for expression in filters:
            if expression in self.failing_filters:
                raise requests.exceptions.ConnectionError(f"index unavailable for {expression}")
        self._results = self.records_by_filter.get(filters[-1], []) if filters else []
    
    def get_results(self):
        return list(self._results)
    
    def get_facet_list(self):
        return self.facet_list


def make_record(record_id, title=None, source='Solr', raw=None):
    record = Mock()
    record.get_unique_id.return_value = record_id
    record.get_title.return_value = title if title is not None else f"Title {record_id}"
    record.get_source_identifier.return_value = source
    record.get_raw_data.return_value = raw or {}
    return record


@pytest.fixture
def record_factory():
    """Factory for mock records."""
    return make_record


@pytest.fixture
def fake_index():
    return FakeIndex


@pytest.fixture
def fake_results():
    return FakeResults


@pytest.fixture
def topic_only_options():
    """Single Topic field with one field and two values allowed."""
    return ProviderOptions.from_options({
        'fields': {'topic_facet': 'Topic'},
        'maxFieldsToSuggest': 1,
        'maxValuesToSuggestPerField': 2
    })


@pytest.fixture
def sample_solr_response():
    """Sample Solr select response with facet counts."""
    return {
        'responseHeader': {'status': 0},
        'response': {
            'numFound': 2,
            'docs': [
                {'id': 'rec1', 'title': 'A History of Art', 'topic_facet': ['History', 'Art']},
                {'id': 'rec2', 'title': ['Modern Science'], 'author_facet': ['Smith, Jane']}
            ]
        },
        'facet_counts': {
            'facet_fields': {
                'topic_facet': ['History', 5, 'Art', 3],
                'author_facet': ['Smith, Jane', 2],
                'format': ['Book', 7]
            }
        }
    }
