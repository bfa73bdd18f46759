"""
Configuration Management

Handles environment variables and configuration settings for the
facetchannels provider and its search backend.
"""

import os
import logging
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from .models import ProviderOptions


DEFAULT_CHANNEL_FIELDS = 'topic_facet:Topic,author_facet:Author'


class Config:
    """Configuration management class."""
    
    def __init__(self, env_file: Optional[str] = None):
        """Initialize configuration from environment variables."""
        # Load .env file if it exists
        if env_file:
            load_dotenv(env_file)
        else:
            env_path = Path('.env')
            if env_path.exists():
                load_dotenv(env_path)
        
        # Search backend
        self.search_base_url = os.getenv('SEARCH_BASE_URL', 'http://localhost:8983/solr/biblio/')
        self.search_source = os.getenv('SEARCH_SOURCE', 'Solr')
        self.request_timeout = self._read_number('REQUEST_TIMEOUT', 30.0, float)
        self.max_retries = self._read_number('MAX_RETRIES', 3, int)
        
        # Channel derivation
        self.channel_rows = self._read_number('CHANNEL_ROWS', 20, int)
        self.channel_fields = os.getenv('CHANNEL_FIELDS', DEFAULT_CHANNEL_FIELDS)
        self.max_fields_to_suggest = self._read_number('CHANNEL_MAX_FIELDS', 2, int)
        self.max_values_to_suggest_per_field = self._read_number('CHANNEL_MAX_VALUES_PER_FIELD', 2, int)
        self.provider_id = os.getenv('CHANNEL_PROVIDER_ID', 'facets')
        self.cover_base_url = os.getenv('COVER_BASE_URL') or None
        
        # Logging
        self.log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.log_file = os.getenv('LOG_FILE') or None
    
    @staticmethod
    def _read_number(name: str, default, cast):
        """Parse a numeric environment variable, falling back to the default."""
        raw = os.getenv(name)
        if raw is None:
            return default
        try:
            return cast(raw)
        except ValueError:
            logging.warning(f"Invalid value for {name}: {raw!r}, using {default}")
            return default
    
    def setup_logging(self):
        """Configure logging based on settings."""
        handlers = [logging.StreamHandler()]
        if self.log_file:
            handlers.append(logging.FileHandler(self.log_file))
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=handlers
        )
    
    def get_search_config(self) -> dict:
        """Get search client configuration."""
        return {
            'base_url': self.search_base_url,
            'timeout': self.request_timeout,
            'max_retries': self.max_retries
        }
    
    def get_provider_options(self) -> ProviderOptions:
        """Get channel provider options."""
        return ProviderOptions.from_options({
            'fields': self.channel_fields,
            'maxFieldsToSuggest': self.max_fields_to_suggest,
            'maxValuesToSuggestPerField': self.max_values_to_suggest_per_field
        })
