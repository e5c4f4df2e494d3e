"""FastAPI dependencies: caller identity from the bearer token."""

from fastapi import HTTPException, Request
from jose import JWTError

from lifting_diary.core.auth import decode_token


async def get_current_user_id(request: Request) -> str:
    """Resolve the opaque user id (JWT `sub`). Raises 401 when absent or invalid."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Not authenticated")
    token = auth_header[7:].strip()
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        payload = decode_token(token)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    user_id = payload.get("sub")
    if not user_id or not str(user_id).strip():
        raise HTTPException(status_code=401, detail="Invalid token")
    return str(user_id)
