"""
Tests for the channel data model.
"""

import pytest

from facetchannels.models import (
    Channel, ChannelEntry, FacetField, FacetValue, ProviderOptions
)


class TestProviderOptions:
    """Test cases for ProviderOptions."""
    
    def test_defaults(self):
        options = ProviderOptions()
        
        assert options.labels == {'topic_facet': 'Topic', 'author_facet': 'Author'}
        assert options.max_fields_to_suggest == 2
        assert options.max_values_to_suggest_per_field == 2
        assert options.max_channels == 4
    
    def test_is_immutable(self):
        options = ProviderOptions()
        
        with pytest.raises(AttributeError):
            options.max_fields_to_suggest = 5
    
    def test_from_options_mapping(self):
        options = ProviderOptions.from_options({
            'fields': {'genre_facet': 'Genre', 'era_facet': 'Era'},
            'maxFieldsToSuggest': '3',
            'maxValuesToSuggestPerField': 4
        })
        
        assert options.fields == (FacetField('genre_facet', 'Genre'), FacetField('era_facet', 'Era'))
        assert options.max_fields_to_suggest == 3
        assert options.max_values_to_suggest_per_field == 4
    
    def test_from_options_string_fields(self):
        options = ProviderOptions.from_options({'fields': 'topic_facet:Topic, format , ,author_facet:Author'})
        
        assert [f.name for f in options.fields] == ['topic_facet', 'format', 'author_facet']
        assert options.labels['format'] == 'format'
    
    def test_repeated_field_keeps_first_label(self):
        options = ProviderOptions.from_options({
            'fields': 'topic_facet:Topic,author_facet:Author,topic_facet:Subject'
        })
        
        assert options.fields == (FacetField('topic_facet', 'Topic'), FacetField('author_facet', 'Author'))
        assert options.labels == {'topic_facet': 'Topic', 'author_facet': 'Author'}
    
    def test_from_options_snake_case_keys(self):
        options = ProviderOptions.from_options({
            'max_fields_to_suggest': 1,
            'max_values_to_suggest_per_field': 5
        })
        
        assert options.max_fields_to_suggest == 1
        assert options.max_values_to_suggest_per_field == 5
    
    def test_from_options_empty_keeps_defaults(self):
        assert ProviderOptions.from_options({}) == ProviderOptions()
    
    def test_invalid_budget_raises(self):
        with pytest.raises(ValueError):
            ProviderOptions.from_options({'maxFieldsToSuggest': 'many'})
    
    def test_negative_budget_clamped(self):
        options = ProviderOptions.from_options({'maxValuesToSuggestPerField': -1})
        assert options.max_values_to_suggest_per_field == 0
    
    def test_invalid_fields_raises(self):
        with pytest.raises(ValueError):
            ProviderOptions.from_options({'fields': 42})


class TestChannel:
    """Test cases for Channel and ChannelEntry."""
    
    def test_to_dict(self):
        channel = Channel(
            title='Topic: Art',
            contents=[ChannelEntry('Painting', 'Solr', 'rec1', 'http://covers/rec1')],
            provider_id='facets'
        )
        
        assert len(channel) == 1
        assert channel.to_dict() == {
            'title': 'Topic: Art',
            'providerId': 'facets',
            'contents': [{
                'title': 'Painting',
                'source': 'Solr',
                'id': 'rec1',
                'thumbnail': 'http://covers/rec1'
            }]
        }
    
    def test_facet_value_from_raw(self):
        value = FacetValue.from_raw('History')
        
        assert value.value == value.display_text == 'History'
        assert value.is_applied is False
        assert value.count is None
