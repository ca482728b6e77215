"""Lookup port - Abstraction over a remote geocoding provider.

Each valid lookup name maps to exactly one implementation of this
protocol (see adapters/lookups/__init__.py).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from ..domain.lookups import Lookup
    from ..domain.models import Query, Result


class LookupPort(Protocol):
    """Port for geocoding providers.

    Implementations: adapters/lookups/

    An instance is created once per lookup name and then shared by every
    caller of the engine, possibly from several threads at once. It must
    therefore be safe for concurrent use, or synchronize internally.
    """

    name: Lookup

    def search(self, query: Query) -> List[Result]:
        """Run a query against the provider.

        Args:
            query: A classified query within this lookup's capability group.

        Returns:
            Normalized results, best match first. An empty list when
            nothing was found.

        Raises:
            UnsupportedQueryError: If the query kind is not supported.
            geopy.exc.GeopyError: On transport, authentication or quota
                failures.
        """
        ...
