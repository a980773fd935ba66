"""
User and bookmark API endpoints.

Responsibility: Account and bookmark endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_store
from api.schemas.users import LoginRequest
from civica.db.store import MemoryStore
from civica.errors import AuthenticationError, NotFoundError
from civica.models.user import Bookmark, BookmarkCreate, User, UserCreate, UserPatch

router = APIRouter()


@router.post("/users", response_model=User, status_code=201)
async def create_user(body: UserCreate, store: MemoryStore = Depends(get_store)):
    """
    Register an account.

    Raises:
        ConflictError: 409 if the username is taken
    """
    return store.users.create(body)


@router.post("/users/login", response_model=User)
async def login(body: LoginRequest, store: MemoryStore = Depends(get_store)):
    """
    Check a username and password.

    Raises:
        AuthenticationError: 401 for an unknown username or wrong password
    """
    user = store.users.authenticate(body.username, body.password)
    if user is None:
        raise AuthenticationError("Invalid username or password")
    return user


@router.get("/users/{user_id}", response_model=User)
async def get_user(user_id: str, store: MemoryStore = Depends(get_store)):
    return store.users.require(user_id)


@router.patch("/users/{user_id}", response_model=User)
async def update_user(user_id: str, body: UserPatch, store: MemoryStore = Depends(get_store)):
    user = store.users.update(user_id, body)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


@router.post("/bookmarks", response_model=Bookmark, status_code=201)
async def create_bookmark(body: BookmarkCreate, store: MemoryStore = Depends(get_store)):
    return store.bookmarks.create(body)


@router.get("/bookmarks/{user_id}", response_model=List[Bookmark])
async def list_bookmarks(user_id: str, store: MemoryStore = Depends(get_store)):
    """A user's bookmarks, newest first."""
    return store.bookmarks.for_user(user_id)


@router.delete("/bookmarks/{bookmark_id}", status_code=204)
async def delete_bookmark(bookmark_id: str, store: MemoryStore = Depends(get_store)):
    if not store.bookmarks.delete(bookmark_id):
        raise NotFoundError("Bookmark", bookmark_id)
    return Response(status_code=204)
