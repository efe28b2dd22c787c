"""Tests for metadata formatters."""

import io
import json

import pytest
from rich.console import Console

import metamagical
from metamagical import MetadataRegistry, Stability
from metamagical.formatters import JSONFormatter, ConsoleFormatter

from conftest import Thing


@pytest.fixture
def console():
    """Create a recording console that writes nowhere."""
    return Console(file=io.StringIO(), record=True, width=120)


class TestJSONFormatter:
    """Test cases for JSONFormatter."""

    def test_format_record(self):
        """Test plain JSON values."""
        formatter = JSONFormatter(indent=None)
        output = formatter.format_record({"name": "thing", "authors": ["a", "b"]})

        assert output == '{"name": "thing", "authors": ["a", "b"]}'

    def test_format_uses_given_registry(self, registry, thing):
        """Test formatting straight from an object."""
        registry.update(thing, {"name": "thing", "stability": Stability.LOCKED})
        data = json.loads(JSONFormatter(registry=registry).format(thing))

        assert data == {"name": "thing", "stability": "locked"}

    def test_references_are_rendered_by_name(self):
        """Test that objects inside a record are encoded by their names."""
        data = json.loads(JSONFormatter().format(metamagical.get))

        assert data["name"] == "get"
        assert data["belongsTo"] == "module metamagical.interface"

    def test_fallback_reference_names(self, registry):
        """Test encoding of objects without metadata."""
        formatter = JSONFormatter(registry=registry)
        unnamed = Thing("unnamed")
        data = json.loads(formatter.format_record({
            "owner": Thing,
            "instance": unnamed,
            "tags": {"b", "a"}
        }))

        assert data["owner"] == "Thing"
        assert data["instance"] == repr(unnamed)
        assert data["tags"] == ["a", "b"]

    def test_format_to_file(self, registry, thing, tmp_path):
        """Test writing JSON output to a file."""
        registry.set(thing, "documentation", "Ünïcode docs")
        output_file = tmp_path / "meta.json"

        JSONFormatter(registry=registry).format_to_file(thing, str(output_file))

        assert json.loads(output_file.read_text(encoding="utf-8")) == {"documentation": "Ünïcode docs"}


class TestConsoleFormatter:
    """Test cases for ConsoleFormatter."""

    def test_format_documented_function(self, console):
        """Test rendering of the interface's own metadata."""
        ConsoleFormatter(console=console).format(metamagical.update)
        output = console.export_text()

        assert "update" in output
        assert "update(object, meta)" in output
        assert "merging" in output
        assert "belongsTo" in output

    def test_format_object_without_metadata(self, console, registry, thing):
        """Test rendering of an empty record."""
        ConsoleFormatter(console=console, registry=registry).format(thing)
        output = console.export_text()

        assert "Thing" in output
        assert "No metadata found" in output

    def test_format_record_properties(self, console):
        """Test that remaining keys become table rows."""
        ConsoleFormatter(console=console).format_record({
            "name": "thing",
            "stability": Stability.DEPRECATED,
            "platforms": ["CPython 3", "PyPy"]
        })
        output = console.export_text()

        assert "thing" in output
        assert "Not documented" in output
        assert "deprecated" in output
        assert "CPython 3, PyPy" in output
