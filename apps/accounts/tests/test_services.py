"""
Service layer unit tests for accounts app.

Tests cover:
- Account creation, scoping and deletion
- Balance adjustment without a floor
- Login resolution order and role hints
"""

import pytest
from uuid import uuid4

from apps.accounts.models import Account
from apps.accounts.services import (
    create_account,
    get_account,
    list_accounts,
    delete_account,
    adjust_balance,
    set_balance,
    DirectoryConfig,
    LoginResult,
    LoginResolver,
    StudentResolver,
    build_resolvers,
    resolve_login,
)
from apps.accounts.services.exceptions import (
    AccountNotFoundError,
    BalanceOutOfRangeError,
    DuplicateAccountCodeError,
    LoginNotFoundError,
)
from apps.accounts.services.login_resolution import (
    ROLE_STUDENT,
    ROLE_SUPER_ADMIN,
    ROLE_TEACHER,
)
from apps.classrooms.models import Teacher
from apps.classrooms.services.exceptions import ClassroomNotFoundError


# =============================================================================
# Account Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestAccountManagement:
    """Tests for account_management.py service functions."""

    def test_create_account(self):
        account = create_account(code='200', name='Lior', balance=30)

        assert account.code == '200'
        assert account.balance == 30
        assert account.classroom is None

    def test_create_account_default_balance(self, classroom):
        account = create_account(code='200', name='Lior', classroom_id=classroom.id)

        assert account.balance == 0
        assert account.classroom == classroom

    def test_create_account_duplicate_code_in_scope(self, student):
        with pytest.raises(DuplicateAccountCodeError):
            create_account(code=student.code, name='Copy')

    def test_same_code_allowed_in_other_scope(self, student, classroom):
        """Codes are unique per classroom, not globally."""
        account = create_account(code=student.code, name='Namesake', classroom_id=classroom.id)

        assert account.classroom == classroom
        assert Account.objects.filter(code=student.code).count() == 2

    def test_create_account_unknown_classroom(self):
        with pytest.raises(ClassroomNotFoundError):
            create_account(code='200', name='Lior', classroom_id=uuid4())

    def test_get_account_is_scoped(self, student, scoped_student, classroom):
        assert get_account(code='101') == student
        assert get_account(code='101', classroom_id=classroom.id) == scoped_student

    def test_get_account_cross_tenant_is_not_found(self, scoped_student):
        with pytest.raises(AccountNotFoundError):
            get_account(code='101')

    def test_list_accounts_sorted_by_name(self):
        Account.objects.create(code='2', name='Zohar')
        Account.objects.create(code='1', name='Adi')

        assert [a.name for a in list_accounts()] == ['Adi', 'Zohar']

    def test_delete_account(self, student):
        deleted = delete_account(code=student.code)

        assert deleted.name == 'Yossi Cohen'
        assert not Account.objects.exists()

    def test_delete_account_not_found(self):
        with pytest.raises(AccountNotFoundError):
            delete_account(code='nope')


# =============================================================================
# Balance Service Tests
# =============================================================================

@pytest.mark.django_db
class TestBalanceManagement:
    """Tests for balance_management.py service functions."""

    def test_adjust_balance_adds(self, student):
        account = adjust_balance(code=student.code, amount=15)

        assert account.balance == 65

    def test_adjust_balance_can_go_negative(self, student):
        """Teachers may fine a student below zero."""
        account = adjust_balance(code=student.code, amount=-80)

        assert account.balance == -30
        student.refresh_from_db()
        assert student.balance == -30

    def test_adjust_balance_only_touches_scope(self, student, scoped_student, classroom):
        adjust_balance(code='101', amount=5, classroom_id=classroom.id)

        student.refresh_from_db()
        scoped_student.refresh_from_db()
        assert student.balance == 50
        assert scoped_student.balance == 15

    def test_adjust_balance_past_column_limit(self, student):
        Account.objects.filter(id=student.id).update(balance=2 ** 31 - 10)

        with pytest.raises(BalanceOutOfRangeError):
            adjust_balance(code=student.code, amount=20)

        student.refresh_from_db()
        assert student.balance == 2 ** 31 - 10

    def test_adjust_balance_below_column_limit(self, student):
        Account.objects.filter(id=student.id).update(balance=-2 ** 31 + 5)

        with pytest.raises(BalanceOutOfRangeError):
            adjust_balance(code=student.code, amount=-6)

        account = adjust_balance(code=student.code, amount=-5)
        assert account.balance == -2 ** 31

    def test_adjust_balance_not_found(self):
        with pytest.raises(AccountNotFoundError):
            adjust_balance(code='nope', amount=5)

    def test_set_balance(self, student):
        account = set_balance(code=student.code, balance=7)

        assert account.balance == 7

    def test_set_balance_negative(self, student):
        assert set_balance(code=student.code, balance=-5).balance == -5

    def test_set_balance_not_found(self, scoped_student):
        with pytest.raises(AccountNotFoundError):
            set_balance(code='101', balance=1)


# =============================================================================
# Login Resolution Tests
# =============================================================================

ADMIN_CONFIG = DirectoryConfig(super_admin_codes=frozenset({'1234'}))


@pytest.mark.django_db
class TestLoginResolution:
    """Tests for login_resolution.py."""

    def test_super_admin(self):
        result = resolve_login(code='1234', resolvers=build_resolvers(ADMIN_CONFIG))

        assert result.role == ROLE_SUPER_ADMIN

    def test_teacher(self, teacher):
        result = resolve_login(code='apple', resolvers=build_resolvers(ADMIN_CONFIG))

        assert result.role == ROLE_TEACHER
        assert result.profile['name'] == 'Ms. Rivka'
        assert result.profile['classroom'] == str(teacher.classroom_id)
        assert result.profile['classroom_name'] == 'Class 4B'

    def test_student(self, student):
        result = resolve_login(code='101', resolvers=build_resolvers(ADMIN_CONFIG))

        assert result.role == ROLE_STUDENT
        assert result.profile['name'] == 'Yossi Cohen'
        assert result.profile['balance'] == 50

    def test_student_in_classroom(self, student, scoped_student, classroom):
        result = resolve_login(
            code='101',
            classroom_id=classroom.id,
            resolvers=build_resolvers(ADMIN_CONFIG),
        )

        assert result.profile['name'] == 'Tamar Katz'

    def test_super_admin_beats_teacher_and_student(self):
        """A code matching several roles resolves by precedence."""
        Teacher.objects.create(password='1234')
        Account.objects.create(code='1234', name='Clash')

        result = resolve_login(code='1234', resolvers=build_resolvers(ADMIN_CONFIG))

        assert result.role == ROLE_SUPER_ADMIN

    def test_teacher_beats_student(self, teacher):
        Account.objects.create(code='apple', name='Clash')

        result = resolve_login(code='apple', resolvers=build_resolvers(ADMIN_CONFIG))

        assert result.role == ROLE_TEACHER

    def test_student_hint_skips_staff(self, teacher):
        Account.objects.create(code='apple', name='Clash')

        result = resolve_login(
            code='apple',
            role_hint='student',
            resolvers=build_resolvers(ADMIN_CONFIG),
        )

        assert result.role == ROLE_STUDENT

    def test_admin_hint_skips_students(self, student):
        with pytest.raises(LoginNotFoundError, match='Wrong password'):
            resolve_login(code='101', role_hint='admin', resolvers=build_resolvers(ADMIN_CONFIG))

    def test_student_hint_message(self):
        with pytest.raises(LoginNotFoundError, match='Student code not found'):
            resolve_login(code='999', role_hint='student', resolvers=build_resolvers(ADMIN_CONFIG))

    def test_unknown_code(self):
        with pytest.raises(LoginNotFoundError):
            resolve_login(code='999', resolvers=build_resolvers(ADMIN_CONFIG))

    def test_custom_resolver_chain(self, student):
        """The chain is injectable; only listed resolvers are consulted."""

        class FixedResolver(LoginResolver):
            roles = ('guest',)

            def try_resolve(self, code, classroom_id=None):
                return LoginResult(role='guest', profile={'code': code})

        result = resolve_login(code='101', resolvers=[FixedResolver(), StudentResolver()])

        assert result == LoginResult(role='guest', profile={'code': '101'})

    def test_default_chain_reads_settings(self):
        """Without explicit resolvers the configured admin password applies."""
        assert resolve_login(code='1234').role == ROLE_SUPER_ADMIN


class TestDirectoryConfig:

    def test_from_settings_codes(self, settings):
        settings.SUPER_ADMIN_CODES = ['a', ' b ', '']

        config = DirectoryConfig.from_settings(settings)

        assert config.super_admin_codes == frozenset({'a', 'b'})

    def test_from_settings_falls_back_to_admin_password(self, settings):
        settings.SUPER_ADMIN_CODES = []
        settings.ADMIN_PASSWORD = 'secret'

        config = DirectoryConfig.from_settings(settings)

        assert config.super_admin_codes == frozenset({'secret'})
