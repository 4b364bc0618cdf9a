from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

from mockcloud.services.exceptions import TokenInvalidError


@dataclass(frozen=True)
class TokenClaims:
    """검증을 통과한 토큰에서 꺼낸 사용자 정보."""
    user_id: str
    username: str
    expires_at: datetime


class TokenService:
    """대칭 키(HS256)로 서명된 JWT를 발급하고 검증합니다."""
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("exp", "user_id", "username")

    def __init__(self, secret: str, ttl: timedelta = timedelta(hours=24)):
        """
        TokenService를 초기화합니다.

        Args:
            secret: 서비스만 알고 있는 서명 키.
            ttl: 발급 시점부터 토큰이 유효한 기간. 기본 24시간.
        """
        if not secret:
            raise ValueError("Token signing secret must not be empty.")
        self.secret = secret
        self.ttl = ttl

    def issue(self, user_id: str, username: str) -> str:
        """사용자 ID와 이름, 만료 시각을 담은 서명된 토큰을 발급합니다."""
        issued_at = datetime.now(timezone.utc)
        payload = {
            "user_id": user_id,
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """
        토큰의 서명, 알고리즘, 만료 시각을 검증하고 클레임을 반환합니다.

        HS256 이외의 알고리즘(none 포함)으로 만든 토큰은 서명이 맞더라도 거부합니다.

        Raises:
            TokenInvalidError: 서명 불일치, 알고리즘 불일치, 만료, 필수 클레임 누락 시.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.ALGORITHM],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenInvalidError("Token has expired.") from e
        except jwt.PyJWTError as e:
            raise TokenInvalidError("Token is invalid.") from e

        user_id = payload["user_id"]
        username = payload["username"]
        if not isinstance(user_id, str) or not user_id or not isinstance(username, str):
            raise TokenInvalidError("Token is invalid.")

        return TokenClaims(
            user_id=user_id,
            username=username,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
