from .user import User
from .lambda_function import Lambda
from .virtual_machine import VirtualMachine
from .sql_database import SQLDatabase
from .nosql_database import NoSQLDatabase
from .resource import Resource

__all__ = ["User", "Lambda", "VirtualMachine", "SQLDatabase", "NoSQLDatabase", "Resource"]
