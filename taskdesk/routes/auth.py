from fastapi import APIRouter, Depends

from taskdesk.app.deps import get_user_registry
from taskdesk.app.schemas import OkResponse, UsernameRequest
from taskdesk.app.services import identity

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=OkResponse)
def register(payload: UsernameRequest, registry=Depends(get_user_registry)):
    identity.register(registry, payload.username)
    return OkResponse()


@router.post("/signin", response_model=OkResponse)
def signin(payload: UsernameRequest, registry=Depends(get_user_registry)):
    identity.sign_in(registry, payload.username)
    return OkResponse()
