# tests/services/test_token_service.py
import pytest
from datetime import datetime, timedelta, timezone

import jwt

from mockcloud.services.token_service import TokenService
from mockcloud.services.exceptions import TokenInvalidError

SECRET = "token-service-test-secret-0123456789abcdef"

@pytest.fixture
def token_service() -> TokenService:
    return TokenService(SECRET)

def _raw_token(payload, secret=SECRET, algorithm="HS256"):
    return jwt.encode(payload, secret, algorithm=algorithm)

def _valid_payload(**overrides):
    payload = {
        "user_id": "user-1",
        "username": "alice",
        "exp": int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp()),
    }
    payload.update(overrides)
    return payload

# ===================================================================
#  발급(issue) 테스트
# ===================================================================
class TestIssue:
    def test_issue_then_verify_returns_claims(self, token_service: TokenService):
        """발급한 토큰을 검증하면 같은 사용자 정보가 나오는지 테스트합니다."""
        token = token_service.issue("user-1", "alice")

        claims = token_service.verify(token)

        assert claims.user_id == "user-1"
        assert claims.username == "alice"

    def test_issue_expires_after_24_hours(self, token_service: TokenService):
        """기본 만료 시각이 발급 후 24시간인지 테스트합니다."""
        before = datetime.now(timezone.utc)

        claims = token_service.verify(token_service.issue("user-1", "alice"))

        expected = before + timedelta(hours=24)
        assert abs((claims.expires_at - expected).total_seconds()) < 5

    def test_empty_secret_is_rejected(self):
        with pytest.raises(ValueError):
            TokenService("")

# ===================================================================
#  검증(verify) 실패 테스트
# ===================================================================
class TestVerifyRejects:
    def test_expired_token(self, token_service: TokenService):
        """만료된 토큰은 거부되어야 합니다."""
        token = _raw_token(_valid_payload(exp=int((datetime.now(timezone.utc) - timedelta(minutes=1)).timestamp())))

        with pytest.raises(TokenInvalidError, match="expired"):
            token_service.verify(token)

    def test_wrong_secret(self, token_service: TokenService):
        """다른 키로 서명된 토큰은 거부되어야 합니다."""
        token = _raw_token(_valid_payload(), secret="another-secret-0123456789abcdefghijkl")

        with pytest.raises(TokenInvalidError):
            token_service.verify(token)

    def test_tampered_payload(self, token_service: TokenService):
        """서명 이후 페이로드가 변조된 토큰은 거부되어야 합니다."""
        header, payload, signature = token_service.issue("user-1", "alice").split(".")
        forged_payload = _raw_token(_valid_payload(user_id="user-2")).split(".")[1]

        with pytest.raises(TokenInvalidError):
            token_service.verify(".".join([header, forged_payload, signature + "x"]))
        with pytest.raises(TokenInvalidError):
            token_service.verify(".".join([header, forged_payload, signature]))

    def test_none_algorithm(self, token_service: TokenService):
        """서명 없는(alg=none) 토큰은 거부되어야 합니다."""
        token = jwt.encode(_valid_payload(), None, algorithm="none")

        with pytest.raises(TokenInvalidError):
            token_service.verify(token)

    def test_other_hmac_algorithm(self, token_service: TokenService):
        """같은 키라도 HS256 이 아닌 알고리즘으로 서명된 토큰은 거부되어야 합니다."""
        token = _raw_token(_valid_payload(), algorithm="HS512")

        with pytest.raises(TokenInvalidError):
            token_service.verify(token)

    @pytest.mark.parametrize("missing", ["user_id", "username", "exp"])
    def test_missing_claim(self, token_service: TokenService, missing: str):
        """필수 클레임이 빠진 토큰은 거부되어야 합니다."""
        payload = _valid_payload()
        del payload[missing]

        with pytest.raises(TokenInvalidError):
            token_service.verify(_raw_token(payload))

    def test_non_string_user_id(self, token_service: TokenService):
        with pytest.raises(TokenInvalidError):
            token_service.verify(_raw_token(_valid_payload(user_id=42)))

    def test_garbage(self, token_service: TokenService):
        with pytest.raises(TokenInvalidError):
            token_service.verify("not-a-jwt")
