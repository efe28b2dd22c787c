#!/usr/bin/env python3
"""
Sample usage examples for Meta:Magical.
"""

import json as json_module

import metamagical
from metamagical import MetadataRegistry, Stability
from metamagical.formatters import JSONFormatter, ConsoleFormatter


class Point:
    """A class we pretend came from somebody else's library."""

    def __init__(self, x, y):
        self.x = x
        self.y = y


def main():
    """Demonstrate various usage patterns."""
    print("Meta:Magical - Sample Usage")
    print("=" * 50)

    # Example 1: Annotate a third-party object after the fact
    print("\n1. Annotating a function from another module:")
    metamagical.update(json_module.dumps, {
        "name": "dumps",
        "signature": "dumps(obj, **kwargs)",
        "stability": Stability.STABLE,
        "documentation": "Serializes `obj` to a JSON formatted string."
    })
    ConsoleFormatter().format(json_module.dumps)

    # Example 2: Objects carrying their own metadata
    print("\n2. Self-carried metadata:")
    setattr(Point, metamagical.symbol, {
        "name": "Point",
        "type": "class",
        "stability": Stability.EXPERIMENTAL
    })
    metamagical.set(Point, "stability", Stability.STABLE)
    print(JSONFormatter().format(Point))

    # Example 3: An isolated registry
    print("\n3. Isolated registry:")
    registry = MetadataRegistry()
    origin = Point(0, 0)
    registry.set(origin, "documentation", "The origin of the plane.")
    print(f"Isolated: {registry.get(origin)}")
    print(f"Shared:   {metamagical.get(origin)}")

    # Example 4: The interface documents itself
    print("\n4. Self-documenting interface:")
    for operation in (metamagical.get, metamagical.set, metamagical.update):
        print(f"  {metamagical.get(operation)['signature']}")


if __name__ == "__main__":
    main()
