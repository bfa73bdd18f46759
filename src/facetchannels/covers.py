"""
Cover image URL generation for channel thumbnails.
"""

from typing import Optional
from urllib.parse import urlencode


class CoverRouter:
    """Builds cover image URLs for records."""
    
    def __init__(self, base_url: str):
        self.base_url = base_url
    
    def get_url(self, record, size: str = 'small') -> Optional[str]:
        """Get a cover URL for ``record`` at the requested size, or None without an id."""
        record_id = record.get_unique_id()
        if not record_id:
            return None
        query = urlencode({'id': record_id, 'size': size})
        separator = '&' if '?' in self.base_url else '?'
        return f"{self.base_url}{separator}{query}"
