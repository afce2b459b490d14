from typing import Any

from fastapi import APIRouter, Body

from backend.auth import jwt_handler

router = APIRouter(tags=['auth'])


@router.post('/jwt')
def issue_token(claims: dict[str, Any] = Body(...)):
    token = jwt_handler.create_access_token(claims)
    return {'token': token}
