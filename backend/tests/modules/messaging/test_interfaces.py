from modules.messaging.interfaces import IMessagingService
from modules.messaging.service import MessagingService


class TestMessagingInterface:
    def test_interface_methods_exist(self):
        """IMessagingService should define required methods."""
        for method in ["create_conversation", "list_conversations", "get_conversation", "send_message"]:
            assert hasattr(IMessagingService, method)

    def test_service_has_interface_methods(self):
        for method in ["create_conversation", "list_conversations", "get_conversation", "send_message"]:
            assert callable(getattr(MessagingService, method))

    def test_instance_satisfies_protocol(self, messaging_service):
        assert isinstance(messaging_service, IMessagingService)
