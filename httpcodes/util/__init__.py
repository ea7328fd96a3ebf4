"""General utilities.

This package includes the synchronization primitive guarding the
registries and helpers for rendering status and method tables.

All utilities in the `misc` and `sync` modules are imported directly into
the front-door `httpcodes` module for convenience::

    import httpcodes

    text = httpcodes.dump_methods(httpcodes.METHOD_DESCRIPTIONS)
"""

from httpcodes.util.misc import dump_methods
from httpcodes.util.misc import dump_status_codes
from httpcodes.util.misc import format_entry
from httpcodes.util.misc import http_status_to_code
from httpcodes.util.misc import print_methods
from httpcodes.util.misc import print_status_codes
from httpcodes.util.sync import RWLock

__all__ = (
    'dump_methods',
    'dump_status_codes',
    'format_entry',
    'http_status_to_code',
    'print_methods',
    'print_status_codes',
    'RWLock',
)
