"""FastAPI routes for appeals management."""

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status
from typing import Optional
from common.deps import get_access, get_storage
from common.enums import EntityKind
from services.access.facade import DataAccess
from services.appeals import schemas, views
from services.documents.schemas import DocumentResponse
from services.documents.service import attach_document
from services.documents.storage import FileStorage, StorageError

router = APIRouter(prefix="/appeals", tags=["appeals"])


@router.get("/", response_model=schemas.AppealListResponse)
def list_appeals(
    search: Optional[str] = None,
    status_filter: Optional[str] = None,
    appeal_type: Optional[str] = None,
    access: DataAccess = Depends(get_access),
):
    """List the current user's appeals joined with their denials."""
    owner_id = access.owner_id()
    loaded = access.appeals.load(owner_id)
    denials_by_id = {denial.id: denial for denial in access.denials.load(owner_id).records}

    shown = views.filter_appeals(
        loaded.records,
        denials_by_id,
        search=search,
        status=status_filter,
        appeal_type=appeal_type,
    )
    return schemas.AppealListResponse(
        source=loaded.source,
        summary=views.summarize(loaded.records, shown),
        appeals=[views.to_row(appeal, denials_by_id) for appeal in shown],
    )


@router.post("/", response_model=schemas.Appeal, status_code=status.HTTP_201_CREATED)
def create_appeal(appeal: schemas.AppealCreate, access: DataAccess = Depends(get_access)):
    """Create a new appeal in draft status. The denial id is not checked."""
    result = access.appeals.create(access.owner_id(), appeal)
    return result.value


@router.post("/letter", response_model=schemas.AppealLetterResponse)
def generate_appeal_letter(
    request: schemas.AppealLetterRequest,
    access: DataAccess = Depends(get_access),
):
    """Render the appeal letter template for one of the user's denials."""
    for denial in access.denials.load().records:
        if denial.id == request.denial_id:
            letter = views.build_appeal_letter(
                denial,
                appeal_date=request.appeal_date,
                appeal_reason=request.appeal_reason,
                submitted_by=request.submitted_by,
            )
            return schemas.AppealLetterResponse(denial_id=denial.id, letter=letter)
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Denial not found")


@router.patch("/{appeal_id}", response_model=schemas.Appeal)
def update_appeal(
    appeal_id: str,
    appeal_update: schemas.AppealUpdate,
    access: DataAccess = Depends(get_access),
):
    """Update appeal fields, including status."""
    result = access.appeals.update(appeal_id, appeal_update)
    if result.value is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Appeal not found")
    return result.value


@router.delete("/{appeal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_appeal(appeal_id: str, access: DataAccess = Depends(get_access)):
    """Delete an appeal."""
    result = access.appeals.delete(appeal_id)
    if not result.value:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Appeal not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{appeal_id}/documents",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
def upload_appeal_document(
    appeal_id: str,
    file: UploadFile = File(...),
    access: DataAccess = Depends(get_access),
    storage: FileStorage = Depends(get_storage),
):
    """Attach a supporting document to an appeal."""
    content = file.file.read()
    try:
        return attach_document(
            storage=storage,
            remote=access.remote,
            owner_id=access.owner_id(),
            parent_kind=EntityKind.APPEALS,
            parent_id=appeal_id,
            file_name=file.filename or "upload",
            content=content,
            content_type=file.content_type,
        )
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
