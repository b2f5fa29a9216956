# careerpath/api/profile_card_routes.py
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from careerpath.api.deps import get_store
from careerpath.core.errors import NotFound
from careerpath.schemas.profile_card import (
    ProfileCardCreate,
    ProfileCardCreated,
    ProfileCardDeleted,
    ProfileCardList,
    ProfileCardOut,
    ProfileCardUpdate,
)
from careerpath.services.profile_cards import ProfileCardStore

router = APIRouter(prefix="/api/profile-cards", tags=["Profile cards"])


def _not_found(result: NotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"success": False, "error": result.error})


@router.post("", response_model=ProfileCardCreated, status_code=201)
def create_card(payload: ProfileCardCreate, store: ProfileCardStore = Depends(get_store)):
    created = store.create(payload)
    return ProfileCardCreated(card=created.card, share_url=created.share_url)

@router.get("", response_model=ProfileCardList)
def list_cards(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    store: ProfileCardStore = Depends(get_store),
):
    page = store.list(limit=limit, offset=offset)
    return ProfileCardList(cards=page.cards, total=page.total)

@router.get("/{card_id}", response_model=ProfileCardOut)
def get_card(card_id: str, store: ProfileCardStore = Depends(get_store)):
    result = store.get(card_id)
    if isinstance(result, NotFound):
        return _not_found(result)
    return ProfileCardOut(card=result)

@router.put("/{card_id}", response_model=ProfileCardOut)
def update_card(card_id: str, patch: ProfileCardUpdate, store: ProfileCardStore = Depends(get_store)):
    result = store.update(card_id, patch)
    if isinstance(result, NotFound):
        return _not_found(result)
    return ProfileCardOut(card=result)

@router.delete("/{card_id}", response_model=ProfileCardDeleted)
def delete_card(card_id: str, store: ProfileCardStore = Depends(get_store)):
    result = store.delete(card_id)
    if isinstance(result, NotFound):
        return _not_found(result)
    return ProfileCardDeleted(id=result.id)
