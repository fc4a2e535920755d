"""
flood_commons – helpers for HTTP load-generation scripts.

Import path convention::

    from flood_commons.http import build_get, build_post
    from flood_commons.testing.generators import rand_alphabet_string
    from flood_commons.kernel.errors import SerializationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
