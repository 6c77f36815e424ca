from fastapi import APIRouter, Depends, Response
from app.core.dependencies import require_guest_id, require_user_id
from app.core.exceptions import NotFoundError
from app.database.supabase_client import get_service_supabase
from app.modules.notes.guest_storage import GuestNoteStorage
from app.modules.notes.schemas import (
    NoteCreate, NoteUpdate, NoteResponse,
    GuestNoteCreate, GuestNoteUpdate, GuestNoteResponse
)
from app.modules.notes.service import NoteService
from supabase import Client
from typing import List

router = APIRouter(tags=["notes"])

LIST_CACHE_CONTROL = "public, max-age=0, s-maxage=300, stale-while-revalidate=59"


def get_note_service(supabase: Client = Depends(get_service_supabase)) -> NoteService:
    return NoteService(supabase)


def get_guest_storage(guest_id: str = Depends(require_guest_id)) -> GuestNoteStorage:
    return GuestNoteStorage(guest_id)


@router.get("/ai_notes", response_model=List[NoteResponse])
async def list_notes(
    response: Response,
    user_id: str = Depends(require_user_id),
    service: NoteService = Depends(get_note_service)
):
    """Notes of a user, newest first"""
    response.headers["Cache-Control"] = LIST_CACHE_CONTROL
    return service.list_notes(user_id)


@router.post("/ai_notes", response_model=NoteResponse, status_code=201)
async def create_note(
    body: NoteCreate,
    user_id: str = Depends(require_user_id),
    service: NoteService = Depends(get_note_service)
):
    return service.create_note(user_id, body)


@router.get("/ai_notes/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: str,
    user_id: str = Depends(require_user_id),
    service: NoteService = Depends(get_note_service)
):
    return service.get_note(note_id, user_id)


@router.put("/ai_notes/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    body: NoteUpdate,
    user_id: str = Depends(require_user_id),
    service: NoteService = Depends(get_note_service)
):
    """Replace title and content of a note owned by user_id"""
    return service.update_note(note_id, user_id, body)


@router.delete("/ai_notes/{note_id}", status_code=204)
async def delete_note(
    note_id: str,
    user_id: str = Depends(require_user_id),
    service: NoteService = Depends(get_note_service)
):
    service.delete_note(note_id, user_id)
    return Response(status_code=204)


@router.get("/guest_notes", response_model=List[GuestNoteResponse])
async def list_guest_notes(storage: GuestNoteStorage = Depends(get_guest_storage)):
    return storage.get_notes()


@router.post("/guest_notes", response_model=GuestNoteResponse, status_code=201)
async def create_guest_note(
    body: GuestNoteCreate,
    storage: GuestNoteStorage = Depends(get_guest_storage)
):
    return storage.save_note(body.title, body.content)


@router.put("/guest_notes/{note_id}", response_model=GuestNoteResponse)
async def update_guest_note(
    note_id: str,
    body: GuestNoteUpdate,
    storage: GuestNoteStorage = Depends(get_guest_storage)
):
    note = storage.update_note(note_id, title=body.title, content=body.content)
    if note is None:
        raise NotFoundError("Note not found")
    return note


@router.delete("/guest_notes/{note_id}", status_code=204)
async def delete_guest_note(
    note_id: str,
    storage: GuestNoteStorage = Depends(get_guest_storage)
):
    if not storage.delete_note(note_id):
        raise NotFoundError("Note not found")
    return Response(status_code=204)


@router.delete("/guest_notes", status_code=204)
async def clear_guest_notes(storage: GuestNoteStorage = Depends(get_guest_storage)):
    """Forget every note of this guest, e.g. after the guest signs up"""
    storage.clear_all_notes()
    return Response(status_code=204)
