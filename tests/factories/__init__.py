from tests.factories.book_fabricator_factory import BookFabricatorFactory
from tests.factories.user_fabricator_factory import UserFabricatorFactory

__all__ = ["BookFabricatorFactory", "UserFabricatorFactory"]
