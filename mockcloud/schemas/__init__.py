from .requests import (
    LambdaInput,
    NoSQLDatabaseInput,
    RegisterRequest,
    ResourceInput,
    SignInRequest,
    SQLDatabaseInput,
    VirtualMachineInput,
    concat_reasons,
    parse_request,
)
