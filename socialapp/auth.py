import os
from jose import jwt, JWTError
from datetime import datetime, timedelta
from fastapi import Request, Response
from passlib.context import CryptContext
import secrets
import logging

logger = logging.getLogger(__name__)

# Prefer SESSION_SECRET but support JWT_SECRET for compatibility
SECRET = os.getenv('SESSION_SECRET') or os.getenv('JWT_SECRET', 'devsecret')
ALGORITHM = os.getenv('SESSION_ALGORITHM', 'HS256')
SESSION_TTL_MINUTES = int(os.getenv('SESSION_TTL_MINUTES', str(60 * 24 * 7)))
SESSION_COOKIE = os.getenv('SESSION_COOKIE', 'session')

pwd_ctx = CryptContext(schemes=os.getenv('PASSWORD_SCHEMES', 'bcrypt').split(','), deprecated='auto')

def hash_password(password: str) -> str:
    return pwd_ctx.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    return pwd_ctx.verify(password, hashed)

def generate_session_id() -> str:
    # 256-bit random id, URL-safe
    return secrets.token_urlsafe(32)

def create_session_token(sid: str, expires_delta: timedelta = None) -> str:
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=SESSION_TTL_MINUTES)
    return jwt.encode({'sid': sid, 'exp': expire}, SECRET, algorithm=ALGORITHM)

def decode_session_token(token: str):
    try:
        payload = jwt.decode(token, SECRET, algorithms=[ALGORITHM])
    except JWTError:
        return None
    return payload.get('sid')

async def get_session(request: Request, response: Response) -> str:
    """Resolve the session handle for this client, minting one if needed."""
    token = request.cookies.get(SESSION_COOKIE)
    sid = decode_session_token(token) if token else None
    if sid is None:
        sid = generate_session_id()
        response.set_cookie(
            SESSION_COOKIE,
            create_session_token(sid),
            max_age=SESSION_TTL_MINUTES * 60,
            httponly=True,
            samesite='lax',
        )
        logger.debug({'msg': 'session_created'})
    return sid
