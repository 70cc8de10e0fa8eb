"""Login, user management and password-reset endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from plotledger.api.deps import get_auth_service
from plotledger.models.user import User, UserRole
from plotledger.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    username: str
    password: str


class AddUserRequest(BaseModel):
    username: str
    password: str
    email: str = ""
    name: Optional[str] = None
    role: Optional[UserRole] = None


class UpdatePasswordRequest(BaseModel):
    user_id: Optional[str] = Field(default=None, alias="userId")
    new_password: Optional[str] = Field(default=None, alias="newPassword")


class ForgotPasswordRequest(BaseModel):
    identifier: str


class ResetPasswordRequest(BaseModel):
    token: str
    password: str


@router.post("/login")
def login(req: LoginRequest, auth: AuthService = Depends(get_auth_service)) -> User:
    return auth.login(req.username, req.password)


@router.post("/users/add")
def add_user(req: AddUserRequest, auth: AuthService = Depends(get_auth_service)) -> dict:
    auth.add_user(req.username, req.password, email=req.email, name=req.name,
                  role=req.role or UserRole.USER)
    return {"success": True, "message": "User created successfully"}


@router.post("/users/update-password")
def update_password(req: UpdatePasswordRequest, auth: AuthService = Depends(get_auth_service)):
    if not req.user_id or not req.new_password:
        return JSONResponse(status_code=400, content={"error": "Missing data"})
    if not auth.update_password(req.user_id, req.new_password):
        return JSONResponse(status_code=404, content={"error": "User not found"})
    return {"success": True, "message": "Password updated"}


@router.post("/forgot-password")
def forgot_password(req: ForgotPasswordRequest, auth: AuthService = Depends(get_auth_service)) -> dict:
    auth.request_reset(req.identifier)
    return {"message": "If account exists, email sent."}


@router.post("/reset-password")
def reset_password(req: ResetPasswordRequest, auth: AuthService = Depends(get_auth_service)) -> dict:
    auth.reset_password(req.token, req.password)
    return {"message": "Password updated successfully"}
