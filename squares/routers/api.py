"""
API router for square endpoints

Provides:
- POST   /api/CreateSquare     -> 201 + new square
- GET    /api/GetSquare        -> 200 + new square (older clients)
- GET    /api/GetSavedSquares  -> 200 + all squares in creation order
- POST   /api/ClearSquares     -> 200, empty body
- DELETE /api/DeleteSquares    -> 204, empty body

Handlers are plain functions, so FastAPI runs them in its threadpool; the store's lock
keeps concurrent writers apart.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ..models import Square
from ..services.square_store import SquareStore

api_router = APIRouter(tags=["Squares"])


def get_store(request: Request) -> SquareStore:
    return request.app.state.store


def _clear(store: SquareStore) -> None:
    try:
        store.clear()
    except OSError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to clear squares.",
        )


@api_router.post(
    "/CreateSquare",
    response_model=Square,
    status_code=status.HTTP_201_CREATED,
    operation_id="CreateSquare",
    summary="Create a new square",
    responses={500: {"description": "Unexpected server error"}},
)
def create_square(store: SquareStore = Depends(get_store)) -> Square:
    """
    Returns a new square with a unique ID, a random Tailwind color,
    and the next coordinates on the spiral after the previous square.
    The square is persisted in the backend.
    """
    return store.create_next()


@api_router.get(
    "/GetSquare",
    response_model=Square,
    operation_id="GetSquare",
    summary="Fetch a new square",
    responses={500: {"description": "Unexpected server error"}},
)
def get_square(store: SquareStore = Depends(get_store)) -> Square:
    """Same as CreateSquare, kept for clients that still create squares with GET."""
    return store.create_next()


@api_router.get(
    "/GetSavedSquares",
    response_model=List[Square],
    operation_id="GetSavedSquares",
    summary="Fetch all saved squares",
    responses={500: {"description": "Unexpected server error"}},
)
def get_saved_squares(store: SquareStore = Depends(get_store)) -> List[Square]:
    """
    Returns every square generated so far, in creation order.
    Each square includes an ID, a Tailwind color class, and X/Y coordinates.
    """
    return store.squares


@api_router.post(
    "/ClearSquares",
    operation_id="ClearSquares",
    summary="Clear all saved squares",
    responses={500: {"description": "The squares file could not be written"}},
)
def clear_squares(store: SquareStore = Depends(get_store)) -> Response:
    """
    Deletes all squares from the backend storage.
    This resets the grid and overwrites the stored square data.
    """
    _clear(store)
    return Response(status_code=status.HTTP_200_OK)


@api_router.delete(
    "/DeleteSquares",
    status_code=status.HTTP_204_NO_CONTENT,
    operation_id="DeleteSquares",
    summary="Delete all saved squares",
    responses={500: {"description": "The squares file could not be written"}},
)
def delete_squares(store: SquareStore = Depends(get_store)) -> Response:
    _clear(store)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
