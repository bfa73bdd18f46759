"""
Base Channel Provider

Supplies the default (no-op) hooks and shared plumbing that concrete
channel providers build on.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Any

from ..models import Channel, ChannelEntry
from .summarizer import RecordSummarizer


class AbstractChannelProvider(ABC):
    """Base class for channel providers."""
    
    def __init__(self):
        self.provider_id = ''
        self.summarizer = RecordSummarizer()
        self.logger = logging.getLogger(self.__class__.__module__)
    
    def configure_search_params(self, params):
        """Hook to adjust search parameters before the primary search runs."""
        pass
    
    def set_cover_router(self, cover_router):
        self.summarizer = RecordSummarizer(cover_router)
    
    def set_provider_id(self, provider_id: str):
        """Set the identifier the host stamps onto every channel from this provider."""
        self.provider_id = provider_id
    
    def set_options(self, options: Dict[str, Any]):
        """Apply provider options. No options are required by default."""
        pass
    
    def summarize_records(self, records: Iterable) -> List[ChannelEntry]:
        """Convert search result records into channel contents."""
        return [self.summarizer.summarize(record) for record in records]
    
    @abstractmethod
    def get_from_record(self, record) -> List[Channel]:
        """Return channels derived from a single record."""
    
    @abstractmethod
    def get_from_search(self, results) -> List[Channel]:
        """Return channels derived from an executed search."""
