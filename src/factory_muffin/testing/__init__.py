"""Testing support – pytest plugin for the factory engine.

Import in your ``conftest.py``::

    pytest_plugins = ["factory_muffin.testing.fixtures"]
"""
