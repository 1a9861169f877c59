"""Supporting document uploads for denials and appeals."""

from pathlib import PurePosixPath
from typing import Optional
from common.enums import EntityKind
from common.ids import generate_id, utc_now
from services.documents.schemas import DocumentResponse
from services.documents.storage import FileStorage, StorageError
from services.remote.database import RemoteDatabase
import logging

logger = logging.getLogger(__name__)

PARENT_FIELDS = {
    EntityKind.DENIALS: "denial_id",
    EntityKind.APPEALS: "appeal_id",
}


def attach_document(
    storage: FileStorage,
    remote: RemoteDatabase,
    owner_id: str,
    parent_kind: EntityKind,
    parent_id: str,
    file_name: str,
    content: bytes,
    content_type: Optional[str] = None,
) -> DocumentResponse:
    """
    Upload a file under ``<kind>/<parent id>/<file name>`` and record its metadata.

    The upload overwrites an existing file at the same path. If the metadata
    cannot be written to the remote database the document is still returned,
    with ``stored=False``.

    Raises:
        StorageError: if the file itself could not be stored
    """
    file_name = PurePosixPath(file_name).name or "upload"
    upload = storage.upload(content, f"{parent_kind.value}/{parent_id}/{file_name}", upsert=True)
    if not upload.ok:
        raise StorageError(upload.error)

    document = DocumentResponse(
        id=generate_id("doc"),
        user_id=owner_id,
        file_name=file_name,
        file_url=upload.value,
        file_type=content_type,
        file_size=len(content),
        uploaded_at=utc_now(),
        **{PARENT_FIELDS[parent_kind]: parent_id},
    )

    result = remote.create(EntityKind.DOCUMENTS, document.model_dump(exclude={"stored"}))
    if not result.ok:
        logger.warning(f"Document {document.id} uploaded but metadata not saved: {result.error}")
        return document.model_copy(update={"stored": False})

    return document
