"""
Attach meta-data to objects, and retrieve it later.

Meta:Magical keeps one process-wide registry mapping objects to their
meta-data, where meta-data is a plain dictionary with an open-ended set of
keys. Objects may also carry meta-data themselves under the ``symbol``
attribute, which lets it travel with them when the registry can't. Lookups
merge both, with the registry taking precedence.
"""

import sys
from typing import Any, Mapping

from .core.models import MetadataRecord, META_SYMBOL, Stability
from .core.registry import MetadataRegistry

_registry = MetadataRegistry()

symbol = META_SYMBOL


def get(obj: Any) -> MetadataRecord:
    """Retrieve all meta-data associated with `obj`."""
    return _registry.get(obj)


def set(obj: Any, key: str, value: Any) -> Any:
    """Associate `value` with `key` in the meta-data of `obj`."""
    return _registry.set(obj, key, value)


def update(obj: Any, meta: Mapping[str, Any]) -> Any:
    """Merge `meta` into the meta-data of `obj`."""
    return _registry.update(obj, meta)


_module = sys.modules[__name__]

update(get, {
    'name': 'get',
    'signature': 'get(object)',
    'type': '(Object) -> { String -> Any }',
    'belongsTo': _module,
    'documentation': 'Retrieves all meta-data associated with `object`.'
})

update(set, {
    'name': 'set',
    'signature': 'set(object, key, value)',
    'type': '(Object, String, Any) -> Object',
    'belongsTo': _module,
    'documentation': 'Updates the meta-data for `object`, '
                     'by associating a new `value` with `key`.'
})

update(update, {
    'name': 'update',
    'signature': 'update(object, meta)',
    'type': '(Object, { String -> Any }) -> Object',
    'belongsTo': _module,
    'documentation': 'Updates the meta-data for `object` by merging '
                     'the values provided by `meta`.'
})

update(_module, {
    'module': 'metamagical.interface',
    'name': 'module metamagical.interface',
    'stability': Stability.STABLE.value,
    'authors': ['Quildreen Motta'],
    'licence': 'MIT',
    'platforms': ['CPython 3'],
    'documentation': 'Defines a way of attaching meta-data to an object, '
                     'and a way of retrieving meta-data from an object. '
                     'Things building on top of this meta-data are expected '
                     'to import this module.'
})
