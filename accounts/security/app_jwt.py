import os, time, jwt

SIGN_KEY = os.getenv("APP_JWT_SIGNING_KEY", "dev-app-jwt")
EXP_MIN  = int(os.getenv("APP_JWT_EXPIRE_MIN", "43200"))
ISSUER   = "mind-dump"
ALGORITHM = "HS256"

def issue_app_jwt(sub: int | str, extra: dict | None = None) -> str:
    """sub = AppUser pk"""
    now = int(time.time())
    payload = {**(extra or {}), "iss": ISSUER, "sub": str(sub), "iat": now, "exp": now + EXP_MIN * 60}
    return jwt.encode(payload, SIGN_KEY, algorithm=ALGORITHM)

def verify_app_jwt(token: str) -> dict:
    # 만료/서명/발급자 + sub 필수
    return jwt.decode(
        token,
        SIGN_KEY,
        algorithms=[ALGORITHM],
        issuer=ISSUER,
        options={"require": ["exp", "iss", "sub"]},
    )
