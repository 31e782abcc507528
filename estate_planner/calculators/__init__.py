"""Helper package that exposes the estate calculators.

The `calculators` package contains small, focused modules that each implement
one piece of the estate analysis:

* ``taxes`` – federal and state estate tax from exemption/rate tables.
* ``validation`` – input checks that must pass before anything is computed.
* ``strategies`` – ordered rule table producing planning suggestions.
* ``estate`` – asset/liability totals and the end-to-end ``compute_estate``.
* ``projection`` – estate growth and tax sensitivity across growth rates.

Each module exposes a few public functions with clear parameters and returns.  See
individual docstrings for details.
"""

from . import taxes, validation, strategies, estate, projection  # noqa: F401

__all__ = ["taxes", "validation", "strategies", "estate", "projection"]
