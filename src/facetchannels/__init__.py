"""
facetchannels - facet-driven channel suggestions for faceted search indexes.
"""

from .models import Channel, ChannelEntry, FacetField, FacetValue, ProviderOptions
from .providers import AbstractChannelProvider, FacetsChannelProvider, RecordSummarizer
from .covers import CoverRouter

__version__ = '0.1.0'

__all__ = [
    'Channel',
    'ChannelEntry',
    'FacetField',
    'FacetValue',
    'ProviderOptions',
    'AbstractChannelProvider',
    'FacetsChannelProvider',
    'RecordSummarizer',
    'CoverRouter'
]
