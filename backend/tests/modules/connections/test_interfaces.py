from modules.connections.interfaces import IConnectionService
from modules.connections.service import ConnectionService


class TestConnectionInterface:
    def test_interface_methods_exist(self):
        """IConnectionService should define required methods."""
        for method in ["send_request", "accept_request", "reject_request", "remove_connection", "list_connections", "list_pending_received", "suggest_users", "get_connected_user_ids"]:
            assert hasattr(IConnectionService, method)

    def test_service_has_interface_methods(self):
        for method in ["send_request", "accept_request", "reject_request", "remove_connection", "list_connections", "list_pending_received", "suggest_users", "get_connected_user_ids"]:
            assert callable(getattr(ConnectionService, method))

    def test_instance_satisfies_protocol(self, connection_service):
        assert isinstance(connection_service, IConnectionService)
