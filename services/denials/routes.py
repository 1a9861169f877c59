"""FastAPI routes for denials management."""

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status
from typing import Optional
from common.deps import get_access, get_storage
from common.enums import EntityKind
from services.access.facade import DataAccess
from services.denials import schemas, views
from services.documents.schemas import DocumentResponse
from services.documents.service import attach_document
from services.documents.storage import FileStorage, StorageError

router = APIRouter(prefix="/denials", tags=["denials"])


@router.get("/", response_model=schemas.DenialListResponse)
def list_denials(
    search: Optional[str] = None,
    status_filter: Optional[str] = None,
    priority: Optional[str] = None,
    access: DataAccess = Depends(get_access),
):
    """List the current user's denials with optional search, status and priority filters."""
    loaded = access.denials.load()
    shown = views.filter_denials(loaded.records, search=search, status=status_filter, priority=priority)

    return schemas.DenialListResponse(
        source=loaded.source,
        summary=views.summarize(loaded.records, shown),
        denials=[views.to_row(denial) for denial in shown],
    )

# create from the denial form, always pending
@router.post("/", response_model=schemas.Denial, status_code=status.HTTP_201_CREATED)
def create_denial(denial: schemas.DenialCreate, access: DataAccess = Depends(get_access)):
    """Create a new denial in pending status."""
    result = access.denials.create(access.owner_id(), denial)
    return result.value


@router.get("/{denial_id}", response_model=schemas.DenialRow)
def get_denial(denial_id: str, access: DataAccess = Depends(get_access)):
    """Get a single denial owned by the current user."""
    for denial in access.denials.load().records:
        if denial.id == denial_id:
            return views.to_row(denial)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Denial not found")


@router.patch("/{denial_id}", response_model=schemas.Denial)
def update_denial(
    denial_id: str,
    denial_update: schemas.DenialUpdate,
    access: DataAccess = Depends(get_access),
):
    """Update denial fields, including status and priority."""
    result = access.denials.update(denial_id, denial_update)
    if result.value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Denial not found")
    return result.value


@router.delete("/{denial_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_denial(denial_id: str, access: DataAccess = Depends(get_access)):
    """Delete a denial. Appeals pointing at it are kept."""
    result = access.denials.delete(denial_id)
    if not result.value:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Denial not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{denial_id}/documents",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
def upload_denial_document(
    denial_id: str,
    file: UploadFile = File(...),
    access: DataAccess = Depends(get_access),
    storage: FileStorage = Depends(get_storage),
):
    """Attach a supporting document to a denial."""
    content = file.file.read()
    try:
        return attach_document(
            storage=storage,
            remote=access.remote,
            owner_id=access.owner_id(),
            parent_kind=EntityKind.DENIALS,
            parent_id=denial_id,
            file_name=file.filename or "upload",
            content=content,
            content_type=file.content_type,
        )
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
