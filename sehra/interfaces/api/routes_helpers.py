"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status


def use_case_error_to_http(exc: Exception) -> HTTPException:
    """Translate a use-case error into the matching HTTP error.

    ``PermissionError`` becomes 403, a ``ValueError`` whose message ends in
    "not found" becomes 404 and any other ``ValueError`` becomes 400.
    """

    detail = str(exc)
    if isinstance(exc, PermissionError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
    if detail.lower().endswith("not found"):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
