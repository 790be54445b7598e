"""
FastAPI dependency providers for number-finder.

The lookup engine is built once (or injected by the caller of
``create_app``) and stored on ``app.state``. Route handlers receive it
through ``get_finder`` so tests can swap in a stub with
``app.dependency_overrides``.

Usage in route modules::

    from fastapi import Depends
    from number_finder.api.dependencies import get_finder

    @router.get("/{number}")
    async def find_number(number: str, finder: NumberLookup = Depends(get_finder)):
        ...
"""

from fastapi import Request

from number_finder.search import NumberLookup


def get_finder(request: Request) -> NumberLookup:
    """Provide the application's lookup engine."""
    finder: NumberLookup = request.app.state.finder
    return finder
