"""Liveness endpoint reporting the documents the service manages."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from records_api.app.api.deps import get_store
from records_api.app.core.storage import DocumentStore
from records_api.app.schemas.envelope import envelope

router = APIRouter()


@router.get("")
async def health(store: DocumentStore = Depends(get_store)) -> JSONResponse:
    """Return ``ok`` along with which documents currently exist on disk."""
    documents = {name: store.path_for(name).exists() for name in store.collections}
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope(status.HTTP_200_OK, "ok", {"documents": documents}),
    )
