"""
Login code resolution (directory service).

A login code is resolved by an explicit, ordered chain of resolvers. Each
resolver implements ``try_resolve(code, classroom_id)`` and returns a
``LoginResult`` or None; the first match wins:

    1. SuperAdminResolver - allowlisted super-admin codes
    2. TeacherResolver    - teacher passwords
    3. StudentResolver    - student account codes in the requested scope

A code that matches more than one role is resolved by this order; nothing
prevents such a collision at creation time.

Example:
    Resolve with the configured chain::

        from apps.accounts.services import resolve_login

        result = resolve_login(code='101')
        # LoginResult(role='student', profile={'name': ..., 'balance': ...})
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence
from uuid import UUID

from apps.accounts.models import Account
from apps.classrooms.models import Teacher
from apps.classrooms.services import scope_filter

from .exceptions import LoginNotFoundError


ROLE_SUPER_ADMIN = 'super_admin'
ROLE_TEACHER = 'teacher'
ROLE_STUDENT = 'student'

# Login form hints, as sent by the client's "type" selector
HINT_ADMIN = 'admin'
HINT_STUDENT = 'student'


@dataclass(frozen=True)
class DirectoryConfig:
    """Credentials the directory needs, read once at process start."""

    super_admin_codes: frozenset = field(default_factory=frozenset)

    @classmethod
    def from_settings(cls, settings):
        codes = getattr(settings, 'SUPER_ADMIN_CODES', None)
        if not codes:
            admin_password = getattr(settings, 'ADMIN_PASSWORD', '')
            codes = [admin_password] if admin_password else []
        return cls(super_admin_codes=frozenset(c.strip() for c in codes if c.strip()))


@dataclass(frozen=True)
class LoginResult:
    role: str
    profile: dict


class LoginResolver:
    """Base class for one step of the resolution chain."""

    roles = ()

    def try_resolve(self, code: str, classroom_id: Optional[UUID] = None) -> Optional[LoginResult]:
        raise NotImplementedError


class SuperAdminResolver(LoginResolver):
    roles = (ROLE_SUPER_ADMIN,)

    def __init__(self, config: DirectoryConfig):
        self.config = config

    def try_resolve(self, code, classroom_id=None):
        if code in self.config.super_admin_codes:
            return LoginResult(role=ROLE_SUPER_ADMIN, profile={})
        return None


class TeacherResolver(LoginResolver):
    roles = (ROLE_TEACHER,)

    def try_resolve(self, code, classroom_id=None):
        teacher = (
            Teacher.objects
            .select_related('classroom')
            .filter(password=code)
            .first()
        )
        if teacher is None:
            return None
        return LoginResult(
            role=ROLE_TEACHER,
            profile={
                'teacher_id': str(teacher.id),
                'name': teacher.name,
                'classroom': str(teacher.classroom_id) if teacher.classroom_id else None,
                'classroom_name': teacher.classroom.name if teacher.classroom else None,
            },
        )


class StudentResolver(LoginResolver):
    roles = (ROLE_STUDENT,)

    def try_resolve(self, code, classroom_id=None):
        account = Account.objects.filter(code=code, **scope_filter(classroom_id)).first()
        if account is None:
            return None
        return LoginResult(
            role=ROLE_STUDENT,
            profile={
                'code': account.code,
                'name': account.name,
                'balance': account.balance,
                'classroom': str(account.classroom_id) if account.classroom_id else None,
            },
        )


_HINT_ROLES = {
    HINT_ADMIN: (ROLE_SUPER_ADMIN, ROLE_TEACHER),
    HINT_STUDENT: (ROLE_STUDENT,),
}


def build_resolvers(config: DirectoryConfig) -> Sequence[LoginResolver]:
    """Return the resolver chain in precedence order."""
    return (
        SuperAdminResolver(config),
        TeacherResolver(),
        StudentResolver(),
    )


def get_directory_config() -> DirectoryConfig:
    """Return the DirectoryConfig built by AccountsConfig.ready()."""
    from django.apps import apps

    return apps.get_app_config('accounts').directory_config


def resolve_login(
    *,
    code: str,
    classroom_id: Optional[UUID] = None,
    role_hint: Optional[str] = None,
    resolvers: Optional[Iterable[LoginResolver]] = None
) -> LoginResult:
    """
    Resolve a login code to a role and profile.

    Args:
        code: The code typed at login
        classroom_id: Scope for student lookup
        role_hint: Optional 'admin' or 'student' restricting the chain
        resolvers: Resolver chain; defaults to build_resolvers() over the
            process DirectoryConfig

    Returns:
        LoginResult of the first resolver that matches

    Raises:
        LoginNotFoundError: If no resolver matches
    """
    if resolvers is None:
        resolvers = build_resolvers(get_directory_config())

    allowed = _HINT_ROLES.get(role_hint)
    for resolver in resolvers:
        if allowed and not set(resolver.roles) & set(allowed):
            continue
        result = resolver.try_resolve(code, classroom_id)
        if result is not None:
            return result

    if role_hint == HINT_STUDENT:
        raise LoginNotFoundError('Student code not found')
    if role_hint == HINT_ADMIN:
        raise LoginNotFoundError('Wrong password')
    raise LoginNotFoundError()
