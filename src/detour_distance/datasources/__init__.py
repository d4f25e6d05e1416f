"""Routing data sources.

Each subdirectory is one routing provider with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, query building
    └── routes.py         # Provider class implementing query_route()

Adding a new provider
---------------------
1. Create ``datasources/{name}/`` with the files above.
   See ``bing/`` for the reference implementation.

2. Implement ``query_route(waypoints)`` returning a ``RouteResult``
   (``services/routing.py``). Never raise for "no route" or server faults;
   return ``RouteNotFound`` / ``RouteServerError`` instead::

       from detour_distance.services.http import session

       def query_route(self, waypoints) -> RouteResult:
           resp = session.get(API_URL, params={...})
           if resp.status_code == 404:
               return RouteNotFound()
           ...

3. Re-export the provider in ``__init__.py`` with ``__all__``.

4. Add tests in ``tests/test_{name}.py``.
"""
