from pydantic import BaseModel, EmailStr

from airline_api.models.enums import Role

# Body fields are optional so the handlers can answer missing values with a 400 {message}

class LoginBody(BaseModel):
    username: str | None = None
    password: str | None = None

class TokenOut(BaseModel):
    token: str
    role: Role
    name: str
    email: str

class RegisterBody(BaseModel):
    username: str | None = None
    password: str | None = None
    name: str | None = None
    email: EmailStr | None = None
    role: str | None = None

class RegisterOut(BaseModel):
    message: str
    username: str
    role: Role
    name: str
    email: str

class SessionClaims(BaseModel):
    """Decoded session token."""
    sub: str
    role: Role
    ssn: str = ""
    employee_id: str = ""
    name: str = ""
    email: str = ""
