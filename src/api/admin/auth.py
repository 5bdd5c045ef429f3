# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication API endpoints.

This module provides endpoints for admin authentication:
- POST /register - Create an admin account
- POST /login - Exchange email and password for a session token
- GET /me - Profile of the signed-in admin

Example:
    POST /api/auth/login
    Body:
        {"email": "admin@example.com", "password": "secret123"}
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends, status

from src.api.dependencies import AuthenticatedUser, get_auth_service
from src.domains.auth.service import AuthService
from src.models.auth import AdminProfile, LoginRequest, LoginResponse, RegisterRequest
from src.models.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()

Service = Annotated[AuthService, Depends(get_auth_service)]


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an admin",
    description="Creates an active admin account. No token is issued.",
)
async def register(
    service: Service,
    payload: Annotated[RegisterRequest | None, Body()] = None,
) -> MessageResponse:
    payload = payload or RegisterRequest()
    await service.register(payload.name, payload.email, payload.password)
    return MessageResponse(message="Admin created successfully")


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in",
    description="Returns a bearer token valid for seven days and the admin profile.",
)
async def login(
    service: Service,
    payload: Annotated[LoginRequest | None, Body()] = None,
) -> LoginResponse:
    payload = payload or LoginRequest()
    return await service.login(payload.email, payload.password)


@router.get(
    "/me",
    response_model=AdminProfile,
    summary="Current admin",
)
async def me(user: AuthenticatedUser, service: Service) -> AdminProfile:
    return await service.get_profile(user.id)
