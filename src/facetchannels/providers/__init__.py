"""
Channel providers.
"""

from .base import AbstractChannelProvider
from .facets import FacetsChannelProvider
from .summarizer import RecordSummarizer

__all__ = [
    'AbstractChannelProvider',
    'FacetsChannelProvider',
    'RecordSummarizer'
]
