from modules.users.interfaces import IUserService
from modules.users.service import UserService


class TestUserInterface:
    def test_interface_methods_exist(self):
        """IUserService should define required methods."""
        for method in ["get_profile", "update_profile", "search_users", "delete_account", "upload_avatar"]:
            assert hasattr(IUserService, method)

    def test_instance_satisfies_protocol(self, user_repo, connection_repo, post_repo, sanitizer):
        service = UserService(user_repo, connection_repo, post_repo, sanitizer)
        assert isinstance(service, IUserService)
