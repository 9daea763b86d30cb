"""
factory_muffin – test fixture factories.

Import path convention::

    from factory_muffin import FactoryMuffin
    from factory_muffin.errors import SaveFailedError
    from factory_muffin.generators import ArrayParam, ProviderCall
    from factory_muffin import facade as fm
"""

from factory_muffin.factory import FactoryMuffin

__version__ = "0.1.0"
__all__ = ["FactoryMuffin", "__version__"]
