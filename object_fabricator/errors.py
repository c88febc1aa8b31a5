"""
object_fabricator 예외 정의
"""

from __future__ import annotations


class FabricatorError(Exception):
    """모든 fabricator 예외의 베이스 클래스"""

    pass


class InvalidModelName(FabricatorError, ValueError):
    """모델 이름이 없거나 유효한 식별자 문자열이 아닌 경우"""

    def __init__(self, model_name: object):
        self.model_name = model_name
        super().__init__(f"Please provide a valid model name, but received: {model_name!r}")


class InvalidAttributes(FabricatorError, TypeError):
    """속성이 매핑이 아니거나 키가 문자열이 아닌 경우"""

    pass


class InvalidAttributeValue(InvalidAttributes):
    """속성 값이 문자열, 불리언, 함수 중 어느 것도 아닌 경우"""

    def __init__(self, key: str | None, value: object):
        self.key = key
        self.value = value
        message = f"Attribute values can only be functions, strings or booleans, but received: {type(value).__name__}"
        if key is not None:
            message += f" (key: {key!r})"
        super().__init__(message)


class InvalidCount(FabricatorError, ValueError):
    """생성 개수가 음이 아닌 정수가 아닌 경우"""

    def __init__(self, count: object):
        self.count = count
        super().__init__(
            "Please provide the number of objects that should be created "
            f"as a non-negative integer, but received: {count!r}"
        )


class InvalidAssociation(FabricatorError, TypeError):
    """연관관계 대상이 ObjectFabricator가 아닌 경우"""

    def __init__(self, target: object):
        self.target = target
        super().__init__(f"Associations can only be bound to an ObjectFabricator, but received: {type(target).__name__}")
