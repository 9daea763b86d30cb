"""Error hierarchy: public re-export surface.

Hierarchy::

    FactoryMuffinError
    ├── DefinitionError          (definition.py)
    │   ├── NoDefinedFactoryError
    │   ├── ClassNotFoundError
    │   └── DirectoryNotFoundError
    ├── GeneratorError           (generator.py)
    │   ├── MalformedDescriptorError
    │   ├── UnknownGeneratorError
    │   └── RecursiveDefinitionError
    ├── LifecycleError           (lifecycle.py)
    │   ├── SaveMethodNotFoundError
    │   ├── DeleteMethodNotFoundError
    │   ├── SaveFailedError
    │   ├── DeleteFailedError
    │   └── DeletingFailedError
    └── ConfigError              (config.validation)
"""

from factory_muffin.errors.base import FactoryMuffinError
from factory_muffin.errors.definition import (
    ClassNotFoundError,
    DefinitionError,
    DirectoryNotFoundError,
    NoDefinedFactoryError,
)
from factory_muffin.errors.generator import (
    GeneratorError,
    MalformedDescriptorError,
    RecursiveDefinitionError,
    UnknownGeneratorError,
)
from factory_muffin.errors.lifecycle import (
    DeleteFailedError,
    DeleteMethodNotFoundError,
    DeletingFailedError,
    LifecycleError,
    SaveFailedError,
    SaveMethodNotFoundError,
)

__all__ = [
    "ClassNotFoundError",
    "DefinitionError",
    "DeleteFailedError",
    "DeleteMethodNotFoundError",
    "DeletingFailedError",
    "DirectoryNotFoundError",
    "FactoryMuffinError",
    "GeneratorError",
    "LifecycleError",
    "MalformedDescriptorError",
    "NoDefinedFactoryError",
    "RecursiveDefinitionError",
    "SaveFailedError",
    "SaveMethodNotFoundError",
    "UnknownGeneratorError",
]
