"""
Mapping of data-access failures onto HTTP errors
"""

from fastapi import HTTPException, status

from app.models.post import MutationResult

STATUS_BY_ERROR_TYPE = {
    'unauthenticated': status.HTTP_401_UNAUTHORIZED,
    'unauthorized': status.HTTP_403_FORBIDDEN,
    'store_failure': status.HTTP_502_BAD_GATEWAY,
}


def raise_for_result(result: MutationResult) -> None:
    """Raise the HTTPException matching a failed mutation; no-op on success"""
    if result.ok:
        return
    raise HTTPException(
        status_code=STATUS_BY_ERROR_TYPE.get(result.error_type, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail=result.error
    )


def raise_for_fetch_error(error: str, what: str) -> None:
    """Raise a 502 for a failed list/detail fetch"""
    if error:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to load {what}: {error}"
        )
