from fastapi import APIRouter, Depends, HTTPException, status

from airline_api.api.deps import get_user_registry
from airline_api.core.security import create_access_token
from airline_api.core.users import UserRegistry, UsernameTaken
from airline_api.models.enums import Role, SELF_REGISTER_ROLES, parse_enum
from airline_api.schemas.auth import LoginBody, TokenOut, RegisterBody, RegisterOut

router = APIRouter()

@router.post("/login", response_model=TokenOut)
def login(payload: LoginBody, registry: UserRegistry = Depends(get_user_registry)):
    """Issue a session token.

    Unknown user and wrong password share one 401 so usernames cannot be probed.
    """
    username = (payload.username or "").strip()
    password = payload.password or ""
    if not username or not password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="username and password are required.")
    user = registry.authenticate(username, password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials.")
    claims = user.token_claims()
    token = create_access_token(subject=user.username, role=user.role.value, claims=claims)
    return {"token": token, "role": user.role, "name": claims["name"], "email": claims["email"]}

@router.post("/register", response_model=RegisterOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterBody, registry: UserRegistry = Depends(get_user_registry)):
    username = (payload.username or "").strip()
    password = payload.password or ""
    name = (payload.name or "").strip()
    email = (payload.email or "").strip()
    raw_role = (payload.role or "").strip().lower()
    if not username or not password or not name or not email or not raw_role:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="username, password, name, email, and role are required.",
        )
    if raw_role == Role.admin.value:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Cannot register as admin.")
    role = parse_enum(Role, raw_role)
    if role not in SELF_REGISTER_ROLES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid role. Must be passenger, agent, or crew.")
    try:
        user = registry.register(username, password, name=name, email=email, role=role)
    except UsernameTaken:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists.")
    return {
        "message": "Registration successful. You can now login.",
        "username": user.username,
        "role": user.role,
        "name": user.name,
        "email": user.email,
    }
