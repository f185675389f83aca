from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_bearer_token, get_current_user, get_use_cases
from app.api.schemas.auth import AuthResponse, CredentialsRequest, UserResponse
from app.domain.entities.user import User

router = APIRouter()


def _to_response(result) -> AuthResponse:
    return AuthResponse(token=result.token, user=UserResponse.model_validate(result.user))


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(payload: CredentialsRequest, use_cases=Depends(get_use_cases)) -> AuthResponse:
    return _to_response(await use_cases["signup"].execute(payload))


@router.post("/login", response_model=AuthResponse)
async def login(payload: CredentialsRequest, use_cases=Depends(get_use_cases)) -> AuthResponse:
    return _to_response(await use_cases["login"].execute(payload))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    current_user: User = Depends(get_current_user),
    token: str | None = Depends(get_bearer_token),
    use_cases=Depends(get_use_cases),
) -> Response:
    await use_cases["logout"].execute(token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)
