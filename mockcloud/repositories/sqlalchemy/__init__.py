from .sqlalchemy_user_repository import SqlalchemyUserRepository
from .sqlalchemy_owned_resource_repository import SqlalchemyOwnedResourceRepository
from .sqlalchemy_catalog_repository import SqlalchemyCatalogRepository
from .sqlalchemy_health_repository import SqlalchemyHealthRepository
