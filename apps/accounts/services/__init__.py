"""Services for accounts business logic."""

from .exceptions import (
    AccountNotFoundError,
    DuplicateAccountCodeError,
    BalanceOutOfRangeError,
    LoginNotFoundError,
)
from .account_management import (
    create_account,
    get_account,
    list_accounts,
    delete_account,
)
from .balance_management import adjust_balance, set_balance
from .login_resolution import (
    DirectoryConfig,
    LoginResult,
    LoginResolver,
    SuperAdminResolver,
    TeacherResolver,
    StudentResolver,
    build_resolvers,
    get_directory_config,
    resolve_login,
)

__all__ = [
    # Exceptions
    'AccountNotFoundError',
    'DuplicateAccountCodeError',
    'BalanceOutOfRangeError',
    'LoginNotFoundError',
    # Account management
    'create_account',
    'get_account',
    'list_accounts',
    'delete_account',
    # Balances
    'adjust_balance',
    'set_balance',
    # Login resolution
    'DirectoryConfig',
    'LoginResult',
    'LoginResolver',
    'SuperAdminResolver',
    'TeacherResolver',
    'StudentResolver',
    'build_resolvers',
    'get_directory_config',
    'resolve_login',
]
