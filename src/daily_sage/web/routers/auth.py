"""Sign-in routes."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ...services.controller import AppController
from ..deps import get_controller

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    """Credentials; ignored in mock mode, where the demo user signs in."""

    email: str | None = None
    display_name: str | None = None
    photo_url: str | None = None


@router.post("/login")
async def login(
    body: LoginRequest | None = None,
    controller: AppController = Depends(get_controller),
):
    """Sign in and return the resulting view."""
    body = body or LoginRequest()
    await controller.login(
        email=body.email,
        display_name=body.display_name,
        photo_url=body.photo_url,
    )
    return controller.to_dict()


@router.post("/logout")
async def logout(controller: AppController = Depends(get_controller)):
    """Sign out."""
    await controller.logout()
    return controller.to_dict()
