from ._base_service import HttpApi, RequestBody, encode_body
from ._transport import HttpxTransport, Transport, TransportResult
from .images_service import ImagesService, is_placeholder_image

__all__ = [
    "HttpApi",
    "HttpxTransport",
    "ImagesService",
    "RequestBody",
    "Transport",
    "TransportResult",
    "encode_body",
    "is_placeholder_image",
]
