import logging
from typing import Any, Dict

from werkzeug.security import check_password_hash, generate_password_hash

from mockcloud.database import models
from mockcloud.repositories.interfaces import IUserRepository
from mockcloud.services.exceptions import AuthenticationError, UserCreationError
from mockcloud.services.token_service import TokenService

logger = logging.getLogger(__name__)


class IdentityService:
    """사용자 등록과 로그인(자격 증명 확인 및 토큰 발급)을 담당합니다."""

    def __init__(self, user_repo: IUserRepository, token_service: TokenService):
        """
        IdentityService를 초기화합니다.

        Args:
            user_repo: 사용자 데이터에 접근하기 위한 리포지토리.
            token_service: 로그인 성공 시 토큰을 발급할 서비스.
        """
        self.user_repo = user_repo
        self.token_service = token_service

    def register(self, username: str, password: str) -> Dict[str, Any]:
        """
        새로운 사용자를 등록하고 곧바로 사용할 수 있는 토큰을 발급합니다.
        비밀번호는 솔트가 포함된 느린 해시(scrypt)로만 저장합니다.

        Returns:
            user_id, username, token 을 담은 딕셔너리. 해시는 포함되지 않습니다.

        Raises:
            UserCreationError: 동일한 이름의 사용자가 이미 존재할 때.
        """
        if self.user_repo.find_by_username(username):
            logger.info("Registration rejected: username '%s' is already taken", username)
            raise UserCreationError(f"Unable to register user '{username}'.")

        new_user = models.User(username=username, password_hash=generate_password_hash(password))
        created_user = self.user_repo.create(new_user)
        logger.info("Registered user %s", created_user.id)
        return self._issue_for(created_user)

    def authenticate(self, username: str, password: str) -> Dict[str, Any]:
        """
        자격 증명을 검증하고, 성공 시 토큰을 발급합니다.

        존재하지 않는 사용자와 틀린 비밀번호는 같은 오류 메시지로 응답합니다.

        Raises:
            AuthenticationError: 사용자가 없거나 비밀번호가 일치하지 않을 때.
        """
        user = self.user_repo.find_by_username(username)
        if not user:
            logger.info("Sign in failed: user '%s' not found", username)
            raise AuthenticationError("Invalid username or password.")

        if not check_password_hash(user.password_hash, password):
            logger.info("Sign in failed: wrong password for user '%s'", username)
            raise AuthenticationError("Invalid username or password.")

        logger.info("User %s signed in", user.id)
        return self._issue_for(user)

    def _issue_for(self, user: models.User) -> Dict[str, Any]:
        return {
            "user_id": user.id,
            "username": user.username,
            "token": self.token_service.issue(user.id, user.username),
        }
