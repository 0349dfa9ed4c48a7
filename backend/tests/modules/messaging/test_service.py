"""Tests for messaging service."""

import pytest

from shared.exceptions import EmptyContentError
from modules.messaging.models import (
    UNKNOWN_SENDER,
    CreateConversationRequest,
    SendMessageRequest,
    pair_key,
)


@pytest.fixture
def people(user_repo):
    return {name: user_repo.add(name) for name in ("Alice", "Bob", "Carol")}


def start(participant_id: str, message: str = "Hi") -> CreateConversationRequest:
    return CreateConversationRequest(participant_id=participant_id, initial_message=message)


class TestPairKey:
    def test_order_independent(self):
        assert pair_key("b", "a") == pair_key("a", "b") == "a:b"


class TestCreateConversation:
    @pytest.mark.asyncio
    async def test_create_with_first_message(self, messaging_service, people):
        alice, bob = people["Alice"], people["Bob"]
        summary = await messaging_service.create_conversation(alice.id, start(bob.id, "Hi Bob"))

        assert {p.id for p in summary.participants} == {alice.id, bob.id}
        assert summary.last_message.content == "Hi Bob"
        assert summary.last_message.sender_name == "Alice Test"

    @pytest.mark.asyncio
    async def test_one_conversation_per_pair(self, messaging_service, conversation_repo, people):
        """Starting again from either side returns the existing conversation unchanged."""
        alice, bob = people["Alice"], people["Bob"]
        first = await messaging_service.create_conversation(alice.id, start(bob.id, "Hi Bob"))
        second = await messaging_service.create_conversation(bob.id, start(alice.id, "Hi Alice"))

        assert second.id == first.id
        assert second.last_message.content == "Hi Bob"
        assert len(conversation_repo.docs) == 1
        assert len(conversation_repo.docs[first.id].messages) == 1

    @pytest.mark.asyncio
    async def test_cannot_message_self(self, messaging_service, conversation_repo, people):
        alice = people["Alice"]
        assert await messaging_service.create_conversation(alice.id, start(alice.id)) is None
        assert conversation_repo.docs == {}

    @pytest.mark.asyncio
    async def test_unknown_participant(self, messaging_service, people):
        assert await messaging_service.create_conversation(people["Alice"].id, start("missing")) is None

    @pytest.mark.asyncio
    async def test_first_message_is_sanitized(self, messaging_service, people):
        summary = await messaging_service.create_conversation(
            people["Alice"].id, start(people["Bob"].id, "<script>x()</script>Hello")
        )
        assert summary.last_message.content == "Hello"

    @pytest.mark.asyncio
    async def test_markup_only_first_message_is_rejected(self, messaging_service, conversation_repo, people):
        with pytest.raises(EmptyContentError):
            await messaging_service.create_conversation(
                people["Alice"].id, start(people["Bob"].id, "<script>x()</script>")
            )
        assert conversation_repo.docs == {}


class TestReadConversation:
    @pytest.mark.asyncio
    async def test_participant_reads_history(self, messaging_service, people):
        alice, bob = people["Alice"], people["Bob"]
        summary = await messaging_service.create_conversation(alice.id, start(bob.id, "Hi"))
        await messaging_service.send_message(summary.id, bob.id, SendMessageRequest(content="Hey"))

        detail = await messaging_service.get_conversation(summary.id, bob.id)

        assert [m.content for m in detail.messages] == ["Hi", "Hey"]
        assert [m.sender_name for m in detail.messages] == ["Alice Test", "Bob Test"]

    @pytest.mark.asyncio
    async def test_outsider_sees_nothing(self, messaging_service, people):
        """A non-participant gets the same result as for a missing conversation."""
        summary = await messaging_service.create_conversation(
            people["Alice"].id, start(people["Bob"].id)
        )
        assert await messaging_service.get_conversation(summary.id, people["Carol"].id) is None
        assert await messaging_service.get_conversation("missing", people["Carol"].id) is None

    @pytest.mark.asyncio
    async def test_deleted_sender_is_unknown(self, messaging_service, user_repo, people):
        alice, bob = people["Alice"], people["Bob"]
        summary = await messaging_service.create_conversation(alice.id, start(bob.id, "Hi"))
        user_repo.delete(alice.id)

        detail = await messaging_service.get_conversation(summary.id, bob.id)

        assert detail.messages[0].sender_name == UNKNOWN_SENDER
        assert [p.id for p in detail.participants] == [bob.id]


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_send_updates_ordering(self, messaging_service, people):
        """Sending a message moves the conversation to the top of the list."""
        alice, bob, carol = people["Alice"], people["Bob"], people["Carol"]
        with_bob = await messaging_service.create_conversation(alice.id, start(bob.id))
        with_carol = await messaging_service.create_conversation(alice.id, start(carol.id))

        listed = await messaging_service.list_conversations(alice.id)
        assert [c.id for c in listed] == [with_carol.id, with_bob.id]

        message = await messaging_service.send_message(
            with_bob.id, bob.id, SendMessageRequest(content="Back to you")
        )
        assert message.sender_name == "Bob Test"

        listed = await messaging_service.list_conversations(alice.id)
        assert [c.id for c in listed] == [with_bob.id, with_carol.id]
        assert listed[0].last_message.content == "Back to you"

    @pytest.mark.asyncio
    async def test_outsider_cannot_send(self, messaging_service, conversation_repo, people):
        summary = await messaging_service.create_conversation(
            people["Alice"].id, start(people["Bob"].id)
        )
        message = await messaging_service.send_message(
            summary.id, people["Carol"].id, SendMessageRequest(content="intrusion")
        )
        assert message is None
        assert len(conversation_repo.docs[summary.id].messages) == 1

    @pytest.mark.asyncio
    async def test_markup_only_message_is_rejected(self, messaging_service, conversation_repo, people):
        summary = await messaging_service.create_conversation(
            people["Alice"].id, start(people["Bob"].id)
        )
        with pytest.raises(EmptyContentError):
            await messaging_service.send_message(
                summary.id, people["Bob"].id, SendMessageRequest(content="<style>p{}</style>")
            )
        assert len(conversation_repo.docs[summary.id].messages) == 1

    @pytest.mark.asyncio
    async def test_list_only_own_conversations(self, messaging_service, people):
        await messaging_service.create_conversation(people["Alice"].id, start(people["Bob"].id))
        assert await messaging_service.list_conversations(people["Carol"].id) == []
