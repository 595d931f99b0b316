"""
Esquemas Pydantic para login y emisión de tokens.
"""
from pydantic import BaseModel


class LoginPayload(BaseModel):
    username: str
    password: str


class TokenOut(BaseModel):
    authToken: str
