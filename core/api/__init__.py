"""
core/api/ — Pure request model for the ToMusic API client.

Public API:
    Types:  ApiResult, JsonBody, MultipartUpload, RequestSpec, HttpFailure
"""

from core.api.types import ApiResult, HttpFailure, JsonBody, MultipartUpload, RequestSpec

__all__ = [
    "ApiResult",
    "HttpFailure",
    "JsonBody",
    "MultipartUpload",
    "RequestSpec",
]
