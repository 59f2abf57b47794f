"""
Request helpers for FastAPI/Starlette applications.
"""

from fastapi import Request


def get_full_url(request: Request) -> str:
    """
    Build the page URL (scheme://host/path) of an incoming request.

    Query string and fragment are left out, so the result can be fed
    directly to breadcrumb derivation.

    Example:
        @app.get("/blog/{slug}")
        async def post(request: Request):
            breadcrumbs = new_breadcrumb_list_from_url(get_full_url(request))
    """
    url = request.url
    return f"{url.scheme}://{url.netloc}{url.path}"
