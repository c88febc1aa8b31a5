from __future__ import annotations

from typing import Any, Mapping

from object_fabricator.domains import Association, LiteralValue, Producer
from object_fabricator.errors import (
    InvalidAssociation,
    InvalidAttributes,
    InvalidAttributeValue,
    InvalidCount,
    InvalidModelName,
)

# 생성 시점에 스스로 검증된 값들
_ALLOWED_SPEC_TYPES = (LiteralValue, Producer, Association)


def validate_model_name(model_name: Any) -> None:
    if not isinstance(model_name, str) or not model_name.isidentifier():
        raise InvalidModelName(model_name)


def validate_fabricator(fabricator: Any) -> None:
    from object_fabricator.fabricator import ObjectFabricator

    if not isinstance(fabricator, ObjectFabricator):
        raise InvalidAssociation(fabricator)


def is_valid_attribute_value(value: Any) -> bool:
    # bool은 str이 아니지만 허용, int/float/None 등은 거부
    return isinstance(value, (str, bool, *_ALLOWED_SPEC_TYPES)) or callable(value)


def validate_attributes(attributes: Any) -> None:
    """템플릿 또는 override 속성을 검증합니다.

    Args:
        attributes (Any): 검증할 속성 매핑

    Raises:
        InvalidAttributes: 매핑이 아니거나 키가 문자열이 아닌 경우
        InvalidAttributeValue: 허용되지 않는 타입의 값이 있는 경우
    """
    if not isinstance(attributes, Mapping):
        raise InvalidAttributes(f"Please provide attributes as a mapping, but received: {type(attributes).__name__}")

    for key, value in attributes.items():
        if not isinstance(key, str):
            raise InvalidAttributes(f"Attribute names must be strings, but received: {key!r}")
        if not is_valid_attribute_value(value):
            raise InvalidAttributeValue(key, value)


def validate_count(count: Any) -> None:
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise InvalidCount(count)


def validate_create_many(count: Any, attributes: Mapping[str, Any]) -> None:
    validate_count(count)
    validate_attributes(attributes)
