"""
Channel Data Model

Structured representations of facet fields, facet values, channels and
the immutable options that govern channel derivation.
"""

from typing import Dict, List, Optional, Tuple, Any, Mapping
from dataclasses import dataclass, field, asdict


DEFAULT_FIELDS = (
    ('topic_facet', 'Topic'),
    ('author_facet', 'Author'),
)


@dataclass(frozen=True)
class FacetField:
    """A facet field name paired with its human-readable label."""
    name: str
    label: str


@dataclass
class FacetValue:
    """One observed value of a facet field."""
    value: str
    display_text: str
    count: Optional[int] = None
    is_applied: bool = False

    @classmethod
    def from_raw(cls, value: Any) -> 'FacetValue':
        """Build a candidate from a record's raw facet data (no display form available)."""
        return cls(value=value, display_text=value)


@dataclass
class ChannelEntry:
    """Summary of a single record inside a channel."""
    title: str
    source: str
    id: Optional[str]
    thumbnail: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class Channel:
    """A titled list of record summaries sharing one facet value."""
    title: str
    contents: List[ChannelEntry] = field(default_factory=list)
    provider_id: str = ''

    def __len__(self) -> int:
        return len(self.contents)

    def to_dict(self) -> Dict:
        return {
            'title': self.title,
            'providerId': self.provider_id,
            'contents': [entry.to_dict() for entry in self.contents]
        }


@dataclass(frozen=True)
class ProviderOptions:
    """Field list and suggestion budgets for a facet channel provider."""
    fields: Tuple[FacetField, ...] = tuple(FacetField(n, l) for n, l in DEFAULT_FIELDS)
    max_fields_to_suggest: int = 2
    max_values_to_suggest_per_field: int = 2

    @property
    def labels(self) -> Dict[str, str]:
        """Ordered mapping of field name to label."""
        return {f.name: f.label for f in self.fields}

    @property
    def max_channels(self) -> int:
        return self.max_fields_to_suggest * self.max_values_to_suggest_per_field

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> 'ProviderOptions':
        """
        Create ProviderOptions from a loosely-typed options mapping.
        
        Accepts both the camelCase keys used by channel configuration files
        and snake_case keys. Missing keys keep their defaults.
        
        Args:
            options: Options mapping
            
        Returns:
            New ProviderOptions instance
            
        Raises:
            ValueError: If a budget is not an integer or the field list is malformed
        """
        defaults = cls()
        fields = defaults.fields
        if options.get('fields') is not None:
            fields = cls._parse_fields(options['fields'])

        max_fields = cls._parse_budget(
            options.get('maxFieldsToSuggest', options.get('max_fields_to_suggest')),
            defaults.max_fields_to_suggest
        )
        max_values = cls._parse_budget(
            options.get('maxValuesToSuggestPerField',
                        options.get('max_values_to_suggest_per_field')),
            defaults.max_values_to_suggest_per_field
        )
        return cls(
            fields=fields,
            max_fields_to_suggest=max_fields,
            max_values_to_suggest_per_field=max_values
        )

    @staticmethod
    def _parse_fields(raw: Any) -> Tuple[FacetField, ...]:
        """Parse a name->label mapping or a 'name:Label,name2:Label2' string."""
        if isinstance(raw, str):
            pairs = []
            for part in raw.split(','):
                part = part.strip()
                if not part:
                    continue
                if ':' in part:
                    name, label = part.split(':', 1)
                else:
                    name, label = part, part
                pairs.append((name.strip(), label.strip()))
            return ProviderOptions._unique_fields(pairs)

        if isinstance(raw, Mapping):
            return ProviderOptions._unique_fields((str(name), str(label)) for name, label in raw.items())

        raise ValueError(f"Unsupported facet field list: {raw!r}")

    @staticmethod
    def _unique_fields(pairs) -> Tuple[FacetField, ...]:
        """Build the field tuple, keeping the first label seen for a repeated name."""
        labels: Dict[str, str] = {}
        for name, label in pairs:
            labels.setdefault(name, label)
        return tuple(FacetField(name, label) for name, label in labels.items())

    @staticmethod
    def _parse_budget(raw: Any, default: int) -> int:
        if raw is None:
            return default
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise ValueError(f"Budget must be an integer, got {raw!r}")
        return max(value, 0)
