from .user import IUserRepository
from .owned_resource import IOwnedResourceRepository
from .catalog import ICatalogRepository
from .health import IHealthRepository
