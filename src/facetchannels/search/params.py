"""
Search Parameters

Holds the query, active filters and requested facets for one search, and
renders them into Solr request parameters.
"""

from typing import Dict, List, Tuple


def escape_value(value: str) -> str:
    """Escape a value for use inside a double-quoted Solr phrase."""
    return str(value).replace('\\', '\\\\').replace('"', '\\"')


class SearchParams:
    """Mutable parameter set for a single search."""
    
    def __init__(self, query: str = '*:*', rows: int = 20, facet_limit: int = 30):
        self.query = query
        self.rows = rows
        self.facet_limit = facet_limit
        self._filters: List[str] = []
        self._facets: Dict[str, str] = {}
    
    def add_facet(self, field: str, label: str):
        """Request facet counts for a field, keeping its label as a display hint."""
        self._facets[field] = label
    
    def get_facets(self) -> Dict[str, str]:
        return dict(self._facets)
    
    def add_filter(self, expression: str):
        """
        Add a ``field:value`` filter expression.
        
        The value is kept verbatim apart from one pair of surrounding double
        quotes, which is dropped; quoting happens when the filter is rendered
        for the backend.
        """
        if ':' not in expression:
            raise ValueError(f"Filter must look like field:value, got {expression!r}")
        expression = self.normalize_filter(expression)
        if expression not in self._filters:
            self._filters.append(expression)
    
    def get_filters(self) -> List[str]:
        return list(self._filters)
    
    def has_filter(self, expression: str) -> bool:
        if ':' not in expression:
            return False
        return self.normalize_filter(expression) in self._filters
    
    @classmethod
    def normalize_filter(cls, expression: str) -> str:
        field, value = cls.split_filter(expression)
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
        return f"{field}:{value}"
    
    @staticmethod
    def split_filter(expression: str) -> Tuple[str, str]:
        field, value = expression.split(':', 1)
        return field, value
    
    def to_request_params(self) -> Dict:
        """Render as Solr ``select`` parameters."""
        params = {
            'q': self.query,
            'rows': self.rows,
            'wt': 'json',
        }
        if self._filters:
            params['fq'] = [
                '{}:"{}"'.format(field, escape_value(value))
                for field, value in map(self.split_filter, self._filters)
            ]
        if self._facets:
            params['facet'] = 'true'
            params['facet.field'] = list(self._facets)
            params['facet.mincount'] = 1
            params['facet.limit'] = self.facet_limit
        return params
