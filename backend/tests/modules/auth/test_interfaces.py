from modules.auth.interfaces import IAuthService
from modules.auth.service import AuthService

from tests.fakes import InMemoryUserRepository


class TestAuthInterface:
    def test_interface_methods_exist(self):
        """IAuthService should define required methods."""
        methods = ["authenticate", "validate_token", "get_user_by_id", "get_user_by_email"]
        for method in methods:
            assert hasattr(IAuthService, method)

    def test_auth_service_has_interface_methods(self):
        """AuthService should have all IAuthService methods."""
        methods = ["authenticate", "validate_token", "get_user_by_id", "get_user_by_email"]
        for method in methods:
            assert callable(getattr(AuthService, method))

    def test_service_satisfies_protocol(self, settings):
        service = AuthService(users=InMemoryUserRepository(), settings=settings)
        assert isinstance(service, IAuthService)
