"""
Search Results

Record and result-set wrappers around Solr responses, plus the manager
that hands out fresh result contexts per search source.
"""

import copy
import logging
from typing import Callable, Dict, List, Optional, Any

from ..models import FacetValue
from .params import SearchParams


class Record:
    """A single search index document."""
    
    def __init__(self, data: Dict[str, Any], source: str = 'Solr'):
        self.data = data
        self.source = source
    
    def get_raw_data(self) -> Dict[str, Any]:
        return self.data
    
    def get_source_identifier(self) -> str:
        return self.source
    
    def get_title(self) -> str:
        title = self.data.get('title', '')
        # Multi-valued title fields use the first value
        if isinstance(title, list):
            return title[0] if title else ''
        return title
    
    def get_unique_id(self) -> Optional[str]:
        return self.data.get('id')
    
    def __repr__(self) -> str:
        return f"Record(id={self.get_unique_id()!r}, source={self.source!r})"


class SearchResults:
    """A search context: parameters plus the records and facets they produced."""
    
    def __init__(self, client, params: Optional[SearchParams] = None, source: str = 'Solr'):
        self.client = client
        self.params = params or SearchParams()
        self.source = source
        self.logger = logging.getLogger(__name__)
        self._results: Optional[List[Record]] = None
        self._total = 0
        self._facet_counts: Dict[str, List] = {}
    
    def get_params(self) -> SearchParams:
        return self.params
    
    def duplicate(self) -> 'SearchResults':
        """
        Return an independent copy of this context.
        
        Parameters are deep-copied so filters added to the copy never reach
        this object. The client is shared; processed results are not copied.
        """
        return SearchResults(self.client, copy.deepcopy(self.params), self.source)
    
    def perform_and_process_search(self):
        """Execute the search and populate records and facet counts."""
        request_params = self.params.to_request_params()
        response = self.client.select(request_params)
        
        body = response.get('response', {})
        self._total = body.get('numFound', 0)
        self._results = [Record(doc, self.source) for doc in body.get('docs', [])]
        self._facet_counts = response.get('facet_counts', {}).get('facet_fields', {})
        
        self.logger.debug(
            f"Search returned {len(self._results)} of {self._total} records "
            f"(filters: {self.params.get_filters()})"
        )
    
    def _ensure_processed(self):
        if self._results is None:
            self.perform_and_process_search()
    
    def get_results(self) -> List[Record]:
        self._ensure_processed()
        return list(self._results)
    
    def get_result_total(self) -> int:
        self._ensure_processed()
        return self._total
    
    def get_facet_list(self) -> Dict[str, Dict]:
        """
        Get aggregated facet values for every requested facet field.
        
        Returns:
            Mapping of field name to ``{'label': str, 'list': [FacetValue]}``,
            in the order the facets were requested. Values already applied
            as filters are flagged with ``is_applied``.
        """
        self._ensure_processed()
        facet_list = {}
        for field, label in self.params.get_facets().items():
            if field not in self._facet_counts:
                continue
            # Solr returns a flat [value, count, value, count, ...] list
            flat = self._facet_counts[field]
            values = []
            for value, count in zip(flat[::2], flat[1::2]):
                values.append(FacetValue(
                    value=value,
                    display_text=value,
                    count=count,
                    is_applied=self.params.has_filter(f"{field}:{value}")
                ))
            facet_list[field] = {'label': label, 'list': values}
        return facet_list


class ResultsManager:
    """Hands out fresh SearchResults objects keyed by source identifier."""
    
    def __init__(self):
        self._factories: Dict[str, Callable[[], SearchResults]] = {}
    
    def register(self, source: str, factory: Callable[[], SearchResults]):
        self._factories[source] = factory
    
    def get(self, source: str) -> SearchResults:
        if source not in self._factories:
            raise KeyError(f"No search results registered for source {source!r}")
        return self._factories[source]()
    
    @classmethod
    def for_client(cls, client, source: str = 'Solr', rows: int = 20) -> 'ResultsManager':
        """Build a manager with a single source backed by ``client``."""
        manager = cls()
        manager.register(source, lambda: SearchResults(client, SearchParams(rows=rows), source))
        return manager
