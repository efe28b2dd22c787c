"""JSON output formatter."""

import json
from typing import Any, Optional

from ..core.models import MetadataRecord
from ..core.registry import MetadataRegistry
from .. import interface


class JSONFormatter:
    """Formats metadata records as JSON."""

    def __init__(self, indent: Optional[int] = 2, registry: Optional[MetadataRegistry] = None):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation level (None for compact output)
            registry: Registry to read metadata from (the shared one if None)
        """
        self.indent = indent
        self.registry = registry

    def format(self, obj: Any) -> str:
        """
        Format the metadata of an object as JSON string.

        Args:
            obj: Object whose metadata is rendered

        Returns:
            JSON string representation
        """
        return self.format_record(self._lookup(obj))

    def format_record(self, record: MetadataRecord) -> str:
        """
        Format an already resolved metadata record as JSON string.

        Args:
            record: Metadata record to format

        Returns:
            JSON string representation
        """
        return json.dumps(record, indent=self.indent, ensure_ascii=False, default=self._encode_reference)

    def format_to_file(self, obj: Any, file_path: str) -> None:
        """
        Format the metadata of an object and write it to file.

        Args:
            obj: Object whose metadata is rendered
            file_path: Output file path
        """
        json_str = self.format(obj)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(json_str)

    def _lookup(self, obj: Any) -> MetadataRecord:
        if self.registry is not None:
            return self.registry.get(obj)
        return interface.get(obj)

    def _encode_reference(self, value: Any) -> Any:
        """Render a non-JSON value by name rather than by content."""
        if isinstance(value, (set, frozenset)):
            return sorted(value, key=repr)
        try:
            name = self._lookup(value).get('name')
        except TypeError:
            name = None
        if name is not None:
            return str(name)
        return getattr(value, '__name__', None) or repr(value)
