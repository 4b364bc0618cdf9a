# tests/services/test_identity_service.py
import pytest
from unittest.mock import MagicMock, ANY

from werkzeug.security import generate_password_hash

from mockcloud.services.identity_service import IdentityService
from mockcloud.services.token_service import TokenService
from mockcloud.services.exceptions import *
from mockcloud.repositories.interfaces import IUserRepository
from mockcloud.database import models

SECRET = "identity-service-test-secret-0123456789"

# ===================================================================
#  Fixture 설정
# ===================================================================

@pytest.fixture
def mock_user_repo() -> MagicMock:
    """IUserRepository에 대한 모의 객체를 생성합니다."""
    return MagicMock(spec=IUserRepository)

@pytest.fixture
def token_service() -> TokenService:
    return TokenService(SECRET)

@pytest.fixture
def identity_service(mock_user_repo: MagicMock, token_service: TokenService) -> IdentityService:
    """테스트에 사용될 IdentityService 인스턴스를 생성하고, 의존성을 주입합니다."""
    return IdentityService(mock_user_repo, token_service)

# ===================================================================
#  사용자 등록(Register) 테스트
# ===================================================================
class TestRegister:
    def test_register_success(self, identity_service: IdentityService, mock_user_repo: MagicMock, token_service: TokenService):
        """사용자 등록 성공 시 ID, 이름, 유효한 토큰을 반환하는지 테스트합니다."""
        # === Arrange ===
        mock_user_repo.find_by_username.return_value = None
        mock_user_repo.create.side_effect = lambda user: models.User(
            id="user-1", username=user.username, password_hash=user.password_hash
        )

        # === Act ===
        result = identity_service.register("alice", "p@ss1234")

        # === Assert ===
        assert result["user_id"] == "user-1"
        assert result["username"] == "alice"
        assert "password" not in result and "password_hash" not in result
        assert token_service.verify(result["token"]).user_id == "user-1"
        mock_user_repo.find_by_username.assert_called_once_with("alice")
        mock_user_repo.create.assert_called_once_with(ANY)

    def test_register_hashes_password(self, identity_service: IdentityService, mock_user_repo: MagicMock):
        """평문 비밀번호가 그대로 저장되지 않는지 테스트합니다."""
        # === Arrange ===
        mock_user_repo.find_by_username.return_value = None
        mock_user_repo.create.side_effect = lambda user: models.User(
            id="user-1", username=user.username, password_hash=user.password_hash
        )

        # === Act ===
        identity_service.register("alice", "p@ss1234")

        # === Assert ===
        saved_user = mock_user_repo.create.call_args.args[0]
        assert saved_user.password_hash != "p@ss1234"
        assert "p@ss1234" not in saved_user.password_hash

    def test_register_fails_if_username_exists(self, identity_service: IdentityService, mock_user_repo: MagicMock):
        """사용자 이름이 중복될 경우 UserCreationError가 발생하는지 테스트합니다."""
        # === Arrange ===
        mock_user_repo.find_by_username.return_value = models.User(id="user-1", username="alice")

        # === Act & Assert ===
        with pytest.raises(UserCreationError):
            identity_service.register("alice", "p@ss1234")
        # 검증: create는 호출되지 않았어야 함
        mock_user_repo.create.assert_not_called()

# ===================================================================
#  로그인(Authenticate) 테스트
# ===================================================================
class TestAuthenticate:
    def test_authenticate_success(self, identity_service: IdentityService, mock_user_repo: MagicMock, token_service: TokenService):
        """올바른 자격 증명으로 로그인 시 토큰이 발급되는지 테스트합니다."""
        # === Arrange ===
        mock_user_repo.find_by_username.return_value = models.User(
            id="user-1", username="alice", password_hash=generate_password_hash("p@ss1234")
        )

        # === Act ===
        result = identity_service.authenticate("alice", "p@ss1234")

        # === Assert ===
        assert result["user_id"] == "user-1"
        assert result["username"] == "alice"
        claims = token_service.verify(result["token"])
        assert claims.username == "alice"

    def test_authenticate_fails_with_wrong_password(self, identity_service: IdentityService, mock_user_repo: MagicMock):
        """잘못된 비밀번호로 인증 실패 시나리오를 테스트합니다."""
        # === Arrange ===
        mock_user_repo.find_by_username.return_value = models.User(
            id="user-1", username="alice", password_hash=generate_password_hash("p@ss1234")
        )

        # === Act & Assert ===
        with pytest.raises(AuthenticationError, match="Invalid username or password"):
            identity_service.authenticate("alice", "wrong_password")

    def test_unknown_user_and_wrong_password_look_the_same(self, identity_service: IdentityService, mock_user_repo: MagicMock):
        """존재하지 않는 사용자와 틀린 비밀번호의 오류 메시지가 같은지 테스트합니다."""
        # === Arrange ===
        mock_user_repo.find_by_username.return_value = None
        with pytest.raises(AuthenticationError) as unknown_user:
            identity_service.authenticate("nobody", "p@ss1234")

        mock_user_repo.find_by_username.return_value = models.User(
            id="user-1", username="alice", password_hash=generate_password_hash("p@ss1234")
        )
        with pytest.raises(AuthenticationError) as wrong_password:
            identity_service.authenticate("alice", "nope-nope")

        # === Assert ===
        assert str(unknown_user.value) == str(wrong_password.value)
