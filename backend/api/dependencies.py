"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations with their
repositories.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from pymongo.database import Database
    from supabase import Client
    from shared.sanitizer import Sanitizer
    from modules.auth.interfaces import IAuthService
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.connections.interfaces import IConnectionService
    from modules.connections.repository import ConnectionRepository
    from modules.posts.interfaces import IPostService
    from modules.posts.repository import LikeRepository, PostRepository
    from modules.comments.interfaces import ICommentService
    from modules.comments.repository import CommentRepository
    from modules.feed.interfaces import IFeedService
    from modules.messaging.interfaces import IMessagingService
    from modules.messaging.repository import ConversationRepository
    from modules.notifications.repository import NotificationRepository


class ServiceContainer:
    """
    Container for all service and repository instances.

    Instances are created lazily on first access and cached as
    singletons within the container. Use reset() to clear them for
    testing.
    """

    def __init__(
        self,
        db: "Client | None" = None,
        documents: "Database | None" = None,
    ) -> None:
        self._db = db
        self._documents = documents
        self._instances: dict[str, object] = {}

    def _get(self, name: str, factory):
        if name not in self._instances:
            self._instances[name] = factory()
        return self._instances[name]

    # -------------------------------------------------------------------------
    # Store clients
    # -------------------------------------------------------------------------

    @property
    def db(self) -> "Client":
        """Supabase client for the relational store."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def documents(self) -> "Database":
        """pymongo database for the document store."""
        if self._documents is None:
            from shared.database import get_document_database
            self._documents = get_document_database()
        return self._documents

    @property
    def sanitizer(self) -> "Sanitizer":
        from shared.sanitizer import Sanitizer
        return self._get("sanitizer", Sanitizer)

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def user_repository(self) -> "UserRepository":
        from modules.users.repository import UserRepository
        return self._get("user_repository", lambda: UserRepository(self.db))

    @property
    def connection_repository(self) -> "ConnectionRepository":
        from modules.connections.repository import ConnectionRepository
        return self._get("connection_repository", lambda: ConnectionRepository(self.db))

    @property
    def post_repository(self) -> "PostRepository":
        from modules.posts.repository import PostRepository
        return self._get("post_repository", lambda: PostRepository(self.db))

    @property
    def like_repository(self) -> "LikeRepository":
        from modules.posts.repository import LikeRepository
        return self._get("like_repository", lambda: LikeRepository(self.db))

    @property
    def comment_repository(self) -> "CommentRepository":
        from modules.comments.repository import CommentRepository
        return self._get("comment_repository", lambda: CommentRepository(self.db))

    @property
    def conversation_repository(self) -> "ConversationRepository":
        from modules.messaging.repository import ConversationRepository
        return self._get(
            "conversation_repository",
            lambda: ConversationRepository(self.documents),
        )

    @property
    def notification_repository(self) -> "NotificationRepository":
        from modules.notifications.repository import NotificationRepository
        return self._get(
            "notification_repository",
            lambda: NotificationRepository(self.documents),
        )

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        from modules.auth.service import AuthService
        return self._get(
            "auth",
            lambda: AuthService(users=self.user_repository, sanitizer=self.sanitizer),
        )

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        from modules.users.service import UserService
        from shared.config import get_settings
        from shared.storage import AvatarStorage

        def build():
            return UserService(
                users=self.user_repository,
                connections=self.connection_repository,
                posts=self.post_repository,
                sanitizer=self.sanitizer,
                storage=AvatarStorage(self.db, get_settings().avatar_bucket),
            )

        return self._get("users", build)

    @property
    def connections(self) -> "IConnectionService":
        """Get the connection service instance."""
        from modules.connections.service import ConnectionService
        return self._get(
            "connections",
            lambda: ConnectionService(
                connections=self.connection_repository,
                users=self.user_repository,
            ),
        )

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        from modules.posts.service import PostService
        return self._get(
            "posts",
            lambda: PostService(
                posts=self.post_repository,
                likes=self.like_repository,
                comments=self.comment_repository,
                users=self.user_repository,
                sanitizer=self.sanitizer,
            ),
        )

    @property
    def comments(self) -> "ICommentService":
        """Get the comment service instance."""
        from modules.comments.service import CommentService
        return self._get(
            "comments",
            lambda: CommentService(
                comments=self.comment_repository,
                posts=self.post_repository,
                users=self.user_repository,
                sanitizer=self.sanitizer,
            ),
        )

    @property
    def feed(self) -> "IFeedService":
        """Get the feed service instance."""
        from modules.feed.service import FeedService
        return self._get(
            "feed",
            lambda: FeedService(
                posts=self.post_repository,
                connections=self.connections,
                post_views=self.posts,
            ),
        )

    @property
    def messaging(self) -> "IMessagingService":
        """Get the messaging service instance."""
        from modules.messaging.service import MessagingService
        return self._get(
            "messaging",
            lambda: MessagingService(
                conversations=self.conversation_repository,
                users=self.user_repository,
                sanitizer=self.sanitizer,
            ),
        )

    def ensure_indexes(self) -> None:
        """Create document store indexes for conversations and notifications."""
        self.conversation_repository.ensure_indexes()
        self.notification_repository.ensure_indexes()

    def reset(self) -> None:
        """
        Reset all cached services and repositories.

        This is primarily for testing - allows tests to get fresh
        instances with different mock dependencies.
        """
        self._instances.clear()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_connection_service() -> "IConnectionService":
    """FastAPI dependency for connection service."""
    return get_container().connections


def get_post_service() -> "IPostService":
    """FastAPI dependency for post service."""
    return get_container().posts


def get_comment_service() -> "ICommentService":
    """FastAPI dependency for comment service."""
    return get_container().comments


def get_feed_service() -> "IFeedService":
    """FastAPI dependency for feed service."""
    return get_container().feed


def get_messaging_service() -> "IMessagingService":
    """FastAPI dependency for messaging service."""
    return get_container().messaging
