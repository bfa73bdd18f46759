"""
Facet-Driven Channel Provider

Builds channels of "records sharing this facet value" by re-running the
current search with one extra facet filter per suggested value.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

import requests

from ..models import Channel, FacetValue, ProviderOptions
from .base import AbstractChannelProvider


class FacetsChannelProvider(AbstractChannelProvider):
    """Channel provider that suggests channels from facet values."""
    
    def __init__(self, results_manager, options: Optional[ProviderOptions] = None):
        super().__init__()
        self.results_manager = results_manager
        self.options = options or ProviderOptions()
    
    def set_options(self, options: Dict[str, Any]):
        """Replace the field list and budgets from an options mapping."""
        self.options = ProviderOptions.from_options(options)
    
    def configure_search_params(self, params):
        """Request facet counts for every configured field, in configured order."""
        for facet_field in self.options.fields:
            params.add_facet(facet_field.name, facet_field.label)
    
    def get_from_record(self, record) -> List[Channel]:
        """
        Derive channels from the facet values stored on a single record.
        
        Args:
            record: Record exposing get_raw_data() and get_source_identifier()
            
        Returns:
            Non-empty channels in field-then-value order
        """
        options = self.options
        data = record.get_raw_data()
        base_results = self.results_manager.get(record.get_source_identifier())
        
        def candidates(field: str) -> Iterable[FacetValue]:
            values = data.get(field) or []
            # Single-valued index fields come back as a bare string
            if isinstance(values, str):
                values = [values]
            return [FacetValue.from_raw(value) for value in values]
        
        return self._collect_channels(options, base_results, candidates)
    
    def get_from_search(self, results) -> List[Channel]:
        """
        Derive channels from the aggregated facet counts of an executed search.
        
        Values already applied as filters on ``results`` are never suggested.
        
        Args:
            results: Executed SearchResults
            
        Returns:
            Non-empty channels in field-then-value order
        """
        options = self.options
        facet_list = results.get_facet_list()
        
        def candidates(field: str) -> Iterable[FacetValue]:
            entry = facet_list.get(field) or {}
            return [value for value in entry.get('list', []) if not value.is_applied]
        
        return self._collect_channels(options, results, candidates)
    
    def _collect_channels(self, options: ProviderOptions, base_results,
                          candidates: Callable[[str], Iterable[FacetValue]]) -> List[Channel]:
        """Walk configured fields and their candidate values within the budgets."""
        max_fields = options.max_fields_to_suggest
        max_values = options.max_values_to_suggest_per_field
        channels = []
        field_count = 0
        
        for facet_field in options.fields:
            if field_count >= max_fields:
                break
            value_count = 0
            for value in candidates(facet_field.name):
                if value_count >= max_values:
                    break
                channel = self.build_channel_from_facet(
                    base_results, facet_field.name, value, options
                )
                if len(channel.contents) > 0:
                    channels.append(channel)
                    value_count += 1
                else:
                    self.logger.debug(f"Dropping empty channel '{channel.title}'")
            if value_count > 0:
                field_count += 1
        
        self.logger.info(f"Derived {len(channels)} channels from {field_count} facet fields")
        return channels
    
    def build_channel_from_facet(self, results, field: str, value: FacetValue,
                                 options: Optional[ProviderOptions] = None) -> Channel:
        """
        Run a copy of ``results`` filtered on one facet value and package it as a channel.
        
        The filter is the raw ``field:value`` expression; ``results`` itself
        is left untouched. Labels come from ``options``, defaulting to the
        provider's current options.
        
        Raises:
            requests.exceptions.RequestException: If the filtered search fails
        """
        options = options or self.options
        new_results = results.duplicate()
        params = new_results.get_params()
        
        filter_expression = f"{field}:{value.value}"
        params.add_filter(filter_expression)
        
        self.logger.debug(f"Building channel for filter {filter_expression}")
        try:
            new_results.perform_and_process_search()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Channel search failed for {filter_expression}: {e}")
            raise
        
        return Channel(
            title=f"{options.labels[field]}: {value.display_text}",
            contents=self.summarize_records(new_results.get_results())
        )
