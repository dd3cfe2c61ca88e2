import pytest

from gqlcore.authorization import HasRoleDirective, Resolver
from gqlcore.directives import Directive, Validator
from gqlcore.users import User, add_to_context


def _context_with_role(role):
    user = User()
    user.add_role(role)
    return add_to_context({}, user)


def test_directive_name_and_protocols():
    directive = HasRoleDirective(role="ADMIN")
    assert directive.implements_directive() == "hasRole"
    assert isinstance(directive, Directive)
    assert isinstance(directive, Validator)


def test_missing_user_rejected():
    with pytest.raises(PermissionError, match="user not provided in cotext"):
        HasRoleDirective(role="ADMIN").validate({}, None)


def test_wrong_role_rejected():
    with pytest.raises(PermissionError) as info:
        HasRoleDirective(role="ADMIN").validate(_context_with_role("user"), None)
    assert str(info.value) == 'access denied, "admin" role required'


@pytest.mark.parametrize("directive_role", ["ADMIN", "Admin", "admin"])
def test_role_check_is_case_insensitive_on_directive(directive_role):
    directive = HasRoleDirective(role=directive_role)
    assert directive.validate(_context_with_role("admin"), None) is None
    with pytest.raises(PermissionError, match='"admin" role required'):
        directive.validate(_context_with_role("user"), None)


def test_greetings():
    resolver = Resolver()
    assert resolver.public_greet({}, "Ann") == "Hello from the public resolver, Ann!"
    assert resolver.private_greet({}, "Ann") == "Hi from the protected resolver, Ann!"