"""Prompt library API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_store
from ..schemas import (
    SavePromptRequest,
    SaveResponse,
    SavedPromptResponse,
    PromptListResponse,
    ErrorResponse,
)
from ...control import PromptStore, SavedPrompt
from ...core.exceptions import StorageError

router = APIRouter(prefix="/prompts", tags=["library"])


def _storage_error(e: StorageError) -> HTTPException:
    # Read/write failures carry the underlying OSError or parse error as cause.
    if e.cause is not None:
        return HTTPException(status_code=500, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


@router.post(
    "",
    response_model=SaveResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
def save_prompt(
    request: SavePromptRequest,
    store: PromptStore = Depends(get_store)
) -> SaveResponse:
    """Store an enhanced prompt in the library."""
    record = SavedPrompt(
        original_input=request.original_input,
        transformed_prompt=request.transformed_prompt,
        frameworks=request.frameworks,
        parameters=request.parameters,
        use_case=request.use_case,
        user_id=request.user_id,
    )
    try:
        record_id = store.save(record)
    except StorageError as e:
        raise _storage_error(e)
    return SaveResponse(success=True, id=record_id)


@router.get(
    "",
    response_model=PromptListResponse,
    responses={500: {"model": ErrorResponse}}
)
def list_prompts(
    user_id: Optional[str] = None,
    limit: Optional[int] = None,
    store: PromptStore = Depends(get_store)
) -> PromptListResponse:
    """
    List saved prompts, newest first.

    Filters by ``user_id`` when given; otherwise returns every record.
    """
    try:
        records = store.list_by_user(user_id) if user_id else store.list_all()
        usage = store.framework_usage(user_id)
    except StorageError as e:
        raise _storage_error(e)
    if limit is not None:
        records = records[:max(limit, 0)]
    return PromptListResponse(
        prompts=[SavedPromptResponse(**r.to_dict()) for r in records],
        total=len(records),
        framework_usage=usage
    )


@router.get(
    "/{record_id}",
    response_model=SavedPromptResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
def get_prompt(record_id: str, store: PromptStore = Depends(get_store)) -> SavedPromptResponse:
    """Get a saved prompt."""
    try:
        record = store.get(record_id)
    except StorageError as e:
        raise _storage_error(e)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Prompt not found: {record_id}")
    return SavedPromptResponse(**record.to_dict())


@router.delete(
    "/{record_id}",
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
def delete_prompt(record_id: str, store: PromptStore = Depends(get_store)) -> dict:
    """Delete a saved prompt."""
    try:
        deleted = store.delete(record_id)
    except StorageError as e:
        raise _storage_error(e)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Prompt not found: {record_id}")
    return {"success": True, "id": record_id}
