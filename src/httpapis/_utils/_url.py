def is_absolute(path: str) -> bool:
    return path.startswith("http")


def build_url(endpoint: str, path: str) -> str:
    """Resolve a request path against the configured endpoint.

    Paths that already start with ``http`` are treated as absolute and returned
    as they are. Anything else is appended to the endpoint without any slash
    normalization, so callers are expected to pass well formed paths.

    Args:
        endpoint: The base URL of the API, e.g. ``https://api.example.com/v1``.
        path: A relative path such as ``/users/42`` or an absolute URL.

    Returns:
        str: The URL the request will be sent to.
    """
    if is_absolute(path):
        return path
    return endpoint + path
