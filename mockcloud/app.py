# mockcloud/app.py
from wsgiref.simple_server import make_server
from datetime import timedelta
import json
import logging
import re
import sys

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from mockcloud.config import Config, load_config
from mockcloud.database.database import connect_with_retry, create_session_factory
from mockcloud.database.db_init import initialize_db
from mockcloud.repositories.sqlalchemy import (
    SqlalchemyCatalogRepository,
    SqlalchemyHealthRepository,
    SqlalchemyOwnedResourceRepository,
    SqlalchemyUserRepository,
)
from mockcloud.schemas import RegisterRequest, SignInRequest, parse_request
from mockcloud.services.catalog_service import CatalogService
from mockcloud.services.exceptions import *
from mockcloud.services.health_service import HealthService
from mockcloud.services.identity_service import IdentityService
from mockcloud.services.provisioning_service import ProvisioningService
from mockcloud.services.resource_kinds import RESOURCE_KINDS
from mockcloud.services.token_service import TokenClaims, TokenService
from mockcloud.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------
## 요청 처리 유틸리티 함수
# --------------------------------------------------------------------------

def get_request_data(environ):
    try:
        content_length = int(environ.get("CONTENT_LENGTH") or 0)
        return json.loads(environ["wsgi.input"].read(content_length)) if content_length > 0 else {}
    except ValueError:
        # json.JSONDecodeError, UnicodeDecodeError 모두 ValueError 의 하위 클래스
        raise RequestValidationError("Unable to parse request body.")

def authorize(environ) -> TokenClaims:
    """
    Authorization 헤더의 토큰을 검증하고 클레임을 반환합니다.
    'Bearer <token>' 형식과 토큰만 보낸 형식을 모두 허용합니다.
    """
    header = environ.get("HTTP_AUTHORIZATION", "").strip()
    if not header:
        raise TokenInvalidError("No Authorization provided.")
    scheme, _, credentials = header.partition(" ")
    token = credentials.strip() if scheme.lower() == "bearer" else header
    if not token:
        raise TokenInvalidError("No Authorization provided.")
    return environ['services']['tokens'].verify(token)

ERROR_STATUS = {
    RequestValidationError: "400 Bad Request",
    UserCreationError: "400 Bad Request",
    AuthenticationError: "401 Unauthorized",
    TokenInvalidError: "401 Unauthorized",
    ResourceNotFoundError: "404 Not Found",
}

def handle_exception(e):
    status = ERROR_STATUS.get(type(e))
    if status is None:
        # StoreError 를 포함한 나머지는 상세 내용을 로그에만 남깁니다.
        logger.error("Unhandled error while serving request", exc_info=e)
        return "500 Internal Server Error", json.dumps({"error": "Internal server error."})
    logger.info("Request rejected with %s: %s", status, e)
    return status, json.dumps({"error": str(e)})

# --------------------------------------------------------------------------
## 라우팅 테이블
# --------------------------------------------------------------------------

KIND_PATTERN = "|".join(re.escape(kind.path) for kind in RESOURCE_KINDS)
ID_PATTERN = r"[a-zA-Z0-9_-]+"

def build_routes():
    return [
        ('GET', r'^/health$', health_handler),
        ('GET', r'^/resources$', list_catalog_handler),
        ('POST', r'^/register$', register_handler),
        ('POST', r'^/signin$', signin_handler),
        ('POST', rf'^/({KIND_PATTERN})$', create_resource_handler),
        ('GET', rf'^/({KIND_PATTERN})$', list_resources_handler),
        ('GET', rf'^/({KIND_PATTERN})/({ID_PATTERN})$', get_resource_handler),
        ('PUT', rf'^/({KIND_PATTERN})/({ID_PATTERN})$', update_resource_handler),
        ('DELETE', rf'^/({KIND_PATTERN})/({ID_PATTERN})$', delete_resource_handler),
    ]

def dispatch(routes, environ, method, path):
    path_matched = False
    for route_method, pattern, route_handler in routes:
        if not (match := re.match(pattern, path)):
            continue
        if method == route_method:
            return route_handler(environ, *match.groups())
        path_matched = True

    if path_matched:
        return '405 Method Not Allowed', json.dumps({'error': 'Method Not Allowed'})
    return '404 Not Found', json.dumps({'error': 'Not Found'})

# --------------------------------------------------------------------------
## WSGI 애플리케이션 (의존성 주입 및 라우팅)
# --------------------------------------------------------------------------

def create_app(config: Config, session_factory: sessionmaker):
    """
    설정과 세션 팩토리를 받아 WSGI 애플리케이션을 생성합니다.

    요청마다 새 DB 세션을 열고, 그 세션으로 리포지토리와 서비스를 만들어
    environ 을 통해 핸들러에 전달합니다. 세션은 응답 직전에 닫힙니다.
    """
    token_service = TokenService(config.jwt_secret, timedelta(hours=config.token_ttl_hours))
    routes = build_routes()

    def application(environ, start_response):
        db_session = session_factory()
        try:
            # 1. 의존성 생성 (Repositories -> Services)
            user_repo = SqlalchemyUserRepository(db_session)
            catalog_repo = SqlalchemyCatalogRepository(db_session)
            health_repo = SqlalchemyHealthRepository(db_session)

            # 2. 생성된 서비스 객체들을 environ을 통해 핸들러에 전달
            environ['services'] = {
                'tokens': token_service,
                'identity': IdentityService(user_repo, token_service),
                'catalog': CatalogService(catalog_repo),
                'health': HealthService(health_repo),
                'provisioning': {
                    kind.path: ProvisioningService(kind, SqlalchemyOwnedResourceRepository(db_session, kind.model))
                    for kind in RESOURCE_KINDS
                },
            }

            # 3. 라우팅 및 핸들러 실행
            path = environ.get("PATH_INFO", "")
            method = environ.get("REQUEST_METHOD", "")
            logger.info("%s request made at %s", method, path)
            status, response_body = dispatch(routes, environ, method, path)

        except Exception as e:
            status, response_body = handle_exception(e)
        finally:
            db_session.close()

        start_response(status, [("Content-Type", "application/json")])
        return [response_body.encode("utf-8")]

    return application

# --------------------------------------------------------------------------
## 핸들러 함수
# --------------------------------------------------------------------------

def health_handler(environ, *args):
    if environ['services']['health'].is_ready():
        return '200 OK', json.dumps({"status": "ok"})
    return '503 Service Unavailable', json.dumps({"status": "unavailable"})

def list_catalog_handler(environ, *args):
    resources = environ['services']['catalog'].list_available()
    return '200 OK', json.dumps(resources)

def register_handler(environ, *args):
    data = parse_request(RegisterRequest, get_request_data(environ))
    auth = environ['services']['identity'].register(data['username'], data['password'])
    return '200 OK', json.dumps(auth)

def signin_handler(environ, *args):
    data = parse_request(SignInRequest, get_request_data(environ))
    auth = environ['services']['identity'].authenticate(data['username'], data['password'])
    return '200 OK', json.dumps(auth)

def create_resource_handler(environ, kind_path):
    claims = authorize(environ)
    service = environ['services']['provisioning'][kind_path]
    fields = parse_request(service.kind.schema, get_request_data(environ))
    return '200 OK', json.dumps(service.create(claims.user_id, fields))

def list_resources_handler(environ, kind_path):
    claims = authorize(environ)
    resources = environ['services']['provisioning'][kind_path].list(claims.user_id)
    return '200 OK', json.dumps(resources)

def get_resource_handler(environ, kind_path, resource_id):
    claims = authorize(environ)
    resource = environ['services']['provisioning'][kind_path].get(claims.user_id, resource_id)
    return '200 OK', json.dumps(resource)

def update_resource_handler(environ, kind_path, resource_id):
    claims = authorize(environ)
    service = environ['services']['provisioning'][kind_path]
    fields = parse_request(service.kind.schema, get_request_data(environ))
    return '200 OK', json.dumps(service.update(claims.user_id, resource_id, fields))

def delete_resource_handler(environ, kind_path, resource_id):
    claims = authorize(environ)
    service = environ['services']['provisioning'][kind_path]
    service.delete(claims.user_id, resource_id)
    return '200 OK', json.dumps({"message": f"{service.kind.label} deleted."})

# --------------------------------------------------------------------------
## 서버 실행
# --------------------------------------------------------------------------

def main():
    configure_logging()
    logger.info("Initiating mockcloud service...")

    try:
        config = load_config()
    except (OSError, ValueError) as e:
        logger.critical("Unable to load config file: %s", e)
        sys.exit(1)
    logging.getLogger().setLevel(config.log_level)

    try:
        engine = connect_with_retry(
            config.db_connection,
            interval_seconds=config.db_retry_interval_seconds,
            timeout_seconds=config.db_retry_timeout_seconds,
        )
        initialize_db(engine)
    except SQLAlchemyError as e:
        logger.critical("Timed out waiting for database connection: %s", e)
        sys.exit(1)

    application = create_app(config, create_session_factory(engine))
    try:
        with make_server(config.host, config.port, application) as httpd:
            logger.info("Starting server on %s", config.bind_address)
            httpd.serve_forever()
    except OSError as e:
        logger.critical("Unable to start server on %s: %s", config.bind_address, e)
        sys.exit(1)

if __name__ == "__main__":
    main()
