"""
속성 해석기 테스트
"""

from types import MappingProxyType

import pytest

from object_fabricator import FabricationContext, LiteralValue, ObjectFabricator, Producer, associate
from object_fabricator.resolver import fabricate_object, resolve_one
from tests.helpers.base_test import BaseTest


@pytest.fixture(scope="function")
def context_() -> FabricationContext:
    fabricator = ObjectFabricator("Probe")
    return FabricationContext(fabricator=fabricator, current_id=7)


class TestResolveOne(BaseTest):
    """resolve_one 분기 테스트"""

    @pytest.mark.parametrize("value", ["Frodo", True, False])
    def test_리터럴은_그대로_반환하는지_확인(self, context_: FabricationContext, value):
        assert resolve_one(value, context_) is value

    def test_literal_래퍼의_값을_반환하는지_확인(self, context_: FabricationContext):
        assert resolve_one(LiteralValue("Frodo"), context_) == "Frodo"

    def test_producer에_context를_넘기는지_확인(self, context_: FabricationContext):
        assert resolve_one(Producer(lambda ctx: ctx.current_id * 2), context_) == 14

    def test_함수에_context를_넘기는지_확인(self, context_: FabricationContext):
        assert resolve_one(lambda ctx: ctx, context_) is context_

    def test_연관관계는_context의_fabricator에_등록되는지_확인(self, context_, book_fabricator):
        book = resolve_one(associate(book_fabricator), context_)

        assert book == {"id": 1, "title": "Book 1"}
        self.assert_associated(context_.fabricator, book_fabricator, times=1)


class TestFabricationContext(BaseTest):
    def test_attributes는_스냅샷인지_확인(self, context_: FabricationContext):
        """이전에 받은 attributes가 이후 기록에 영향을 받지 않는지 확인"""
        context_.set("name", "Frodo")
        snapshot = context_.attributes

        context_.set("email", "Frodo@mail.com")

        assert isinstance(snapshot, MappingProxyType)
        assert dict(snapshot) == {"name": "Frodo"}
        assert dict(context_.attributes) == {"name": "Frodo", "email": "Frodo@mail.com"}

    def test_to_object는_id를_앞에_두는지_확인(self, context_: FabricationContext):
        context_.set("name", "Frodo")

        assert list(context_.to_object("id").items()) == [("id", 7), ("name", "Frodo")]

    def test_model_name을_노출하는지_확인(self, context_: FabricationContext):
        assert context_.model_name == "Probe"


class TestFabricateObject(BaseTest):
    def test_호출마다_id를_한_번만_증가시키는지_확인(self):
        fabricator = ObjectFabricator("User")

        first = fabricate_object(fabricator, {"a": lambda ctx: ctx.current_id, "b": lambda ctx: ctx.current_id})
        second = fabricate_object(fabricator, {})

        assert first == {"id": 1, "a": 1, "b": 1}
        assert second == {"id": 2}
        assert fabricator.count == 2

    def test_중첩_생성이_부모_id를_바꾸지_않는지_확인(self):
        """같은 fabricator를 중첩 호출해도 바깥 객체의 id가 유지되는지 확인"""
        tree_fabricator = ObjectFabricator("Node", {"label": "leaf"})

        node = fabricate_object(
            tree_fabricator,
            {
                "child": lambda ctx: ctx.fabricator.create(),
                "self_id": lambda ctx: ctx.current_id,
            },
        )

        assert node == {"id": 1, "child": {"id": 2, "label": "leaf"}, "self_id": 1}
