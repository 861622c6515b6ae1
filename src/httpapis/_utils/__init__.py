from ._headers import HeaderPolicy, mask_headers, merge_headers
from ._request_spec import SUPPORTED_METHODS, HttpMethod, RequestSpec
from ._url import build_url, is_absolute

__all__ = [
    "HeaderPolicy",
    "HttpMethod",
    "RequestSpec",
    "SUPPORTED_METHODS",
    "build_url",
    "is_absolute",
    "mask_headers",
    "merge_headers",
]
