# mockcloud/services/exceptions.py

# --- Not Found Exceptions ---
class ResourceNotFoundError(Exception):
    """요청한 사용자가 소유한 리소스를 찾을 수 없을 때 (존재하지 않거나 다른 사용자의 것)"""
    pass

# --- Creation/Validation Exceptions ---
class RequestValidationError(ValueError):
    """요청 본문을 해석할 수 없거나 값이 허용 범위를 벗어났을 때"""
    pass

class UserCreationError(Exception):
    """사용자 등록 실패 시 (이미 사용 중인 사용자 이름 등)"""
    pass

# --- Auth Exceptions ---
class TokenInvalidError(Exception):
    """토큰이 없거나, 서명/알고리즘이 맞지 않거나, 만료되었을 때"""
    pass

class AuthenticationError(Exception):
    """사용자 자격 증명 실패 시"""
    pass

# --- Store Exceptions ---
class StoreError(Exception):
    """데이터베이스 연결 또는 쿼리 실패 시. 상세 내용은 클라이언트에 노출하지 않습니다."""
    pass
