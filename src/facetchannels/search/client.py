"""
Solr Search Client

Thin HTTP client for a Solr-style ``select`` endpoint. Used by
SearchResults to execute primary searches and channel sub-searches.
"""

import logging
import requests
from typing import Dict, Optional
from urllib.parse import urljoin

from ..utils import retry_on_request_failure


class SolrSearchClient:
    """Client for querying a Solr index over HTTP."""
    
    def __init__(self, base_url: str = "http://localhost:8983/solr/biblio/",
                 timeout: float = 30.0, max_retries: int = 3,
                 retry_delay: float = 0.5):
        self.base_url = base_url.rstrip('/') + '/'
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': 'facetchannels/0.1.0',
            'Accept': 'application/json'
        })
        self.logger = logging.getLogger(__name__)
        self._retry = retry_on_request_failure(
            max_attempts=max_retries,
            base_delay=retry_delay,
            logger=self.logger
        )
    
    def _make_request(self, endpoint: str, params: Optional[Dict] = None) -> Dict:
        """Make a single GET request and decode the JSON body."""
        url = urljoin(self.base_url, endpoint)
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
    
    def select(self, params: Dict) -> Dict:
        """
        Run a search against the ``select`` handler.
        
        Args:
            params: Request parameters (see SearchParams.to_request_params)
            
        Returns:
            Decoded Solr JSON response
            
        Raises:
            requests.exceptions.RequestException: If every attempt fails
        """
        request = self._retry(self._make_request)
        self.logger.debug(f"Solr select: q={params.get('q')} fq={params.get('fq')}")
        return request('select', params)
