from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Mapping

from object_fabricator.domains import Association, Producer
from object_fabricator.enums import AttributeKind, Multiplicity
from object_fabricator.errors import InvalidAttributeValue

if TYPE_CHECKING:
    from object_fabricator.fabricator import ObjectFabricator


def sequence(sequence_value_function: Callable[[int], Any]) -> Producer:
    """생성 중인 객체의 id로 값을 만드는 속성을 반환합니다.

    Examples:
        >>> title = sequence(lambda n: f"Book {n}")
    """
    if not callable(sequence_value_function):
        raise InvalidAttributeValue(None, sequence_value_function)
    return Producer(lambda context: sequence_value_function(context.current_id), AttributeKind.SEQUENCE)


def template(template_value_function: Callable[[Mapping[str, Any]], Any]) -> Producer:
    """생성 중인 객체에서 먼저 해석된 속성들로 값을 만드는 속성을 반환합니다.

    Examples:
        >>> email = template(lambda attrs: f"{attrs['name']}@mail.com")
    """
    if not callable(template_value_function):
        raise InvalidAttributeValue(None, template_value_function)
    return Producer(lambda context: template_value_function(context.attributes), AttributeKind.TEMPLATE)


def associate(fabricator: ObjectFabricator, attributes: Mapping[str, Any] | None = None) -> Association:
    """자식 fabricator로 객체 하나를 만드는 연관관계 속성을 반환합니다.

    Args:
        fabricator (ObjectFabricator): 자식 fabricator
        attributes (Mapping[str, Any] | None): 자식 생성 시 덮어쓸 속성

    Returns:
        Association: 부모 템플릿에 넣을 속성

    Raises:
        InvalidAssociation: fabricator가 ObjectFabricator가 아닌 경우
        InvalidAttributes: attributes가 유효하지 않은 경우
    """
    return Association(fabricator=fabricator, overrides=attributes, multiplicity=Multiplicity.ONE)


def associate_to_many(
    fabricator: ObjectFabricator, count: int, attributes: Mapping[str, Any] | None = None
) -> Association:
    """자식 fabricator로 객체 count개를 만드는 연관관계 속성을 반환합니다.

    Args:
        fabricator (ObjectFabricator): 자식 fabricator
        count (int): 부모 객체 하나당 생성할 자식 객체 수
        attributes (Mapping[str, Any] | None): 자식 생성 시 덮어쓸 속성

    Returns:
        Association: 부모 템플릿에 넣을 속성

    Raises:
        InvalidAssociation: fabricator가 ObjectFabricator가 아닌 경우
        InvalidCount: count가 음이 아닌 정수가 아닌 경우
        InvalidAttributes: attributes가 유효하지 않은 경우
    """
    return Association(fabricator=fabricator, overrides=attributes, multiplicity=Multiplicity.MANY, count=count)
