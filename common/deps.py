"""FastAPI dependencies resolving objects built by the application factory."""

from fastapi import Request
from services.access.facade import DataAccess
from services.auth.client import AuthClient
from services.documents.storage import FileStorage


def get_access(request: Request) -> DataAccess:
    return request.app.state.access


def get_auth(request: Request) -> AuthClient:
    return request.app.state.auth


def get_storage(request: Request) -> FileStorage:
    return request.app.state.storage
