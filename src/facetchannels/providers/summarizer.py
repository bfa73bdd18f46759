"""
Record summarization for channel contents.
"""

from typing import Optional

from ..models import ChannelEntry


class RecordSummarizer:
    """Projects a record onto a ChannelEntry."""
    
    thumbnail_size = 'medium'
    
    def __init__(self, cover_router=None):
        self.cover_router = cover_router
    
    def summarize(self, record) -> ChannelEntry:
        thumbnail: Optional[str] = None
        if self.cover_router is not None:
            thumbnail = self.cover_router.get_url(record, self.thumbnail_size)
        return ChannelEntry(
            title=record.get_title() or '',
            source=record.get_source_identifier() or '',
            id=record.get_unique_id(),
            thumbnail=thumbnail
        )
