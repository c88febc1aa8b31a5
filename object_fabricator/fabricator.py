from __future__ import annotations

import sys
from typing import Any, Callable, Mapping

from object_fabricator import helpers
from object_fabricator.domains import Association, Producer
from object_fabricator.resolver import fabricate_object
from object_fabricator.utils.common import get_logger
from object_fabricator.validation import validate_attributes, validate_create_many, validate_model_name

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


class ObjectFabricator:
    """모델 하나에 대한 테스트 데이터 생성기.

    템플릿의 각 속성은 문자열/불리언 리터럴, 함수(sequence, template 헬퍼 포함),
    또는 다른 fabricator와의 연관관계(associate, associate_to_many)일 수 있습니다.

    Attributes:
        model_name (str): 모델 이름
        attributes (dict[str, Any]): 속성 템플릿
        current_id (int): 마지막으로 생성한 객체의 id (0이면 아직 생성 전)
        count (int): 지금까지 생성한 객체 수, clean()으로 초기화되지 않음
        associations (list[ObjectFabricator]): 연관관계로 호출된 자식 fabricator 목록

    Examples:
        >>> user_fabricator = ObjectFabricator("User", {"name": "Frodo", "age": "30"})
        >>> user_fabricator.create()
        {'id': 1, 'name': 'Frodo', 'age': '30'}
    """

    def __init__(self, model_name: str = None, attributes: Mapping[str, Any] | None = None):
        attributes = {} if attributes is None else attributes
        validate_model_name(model_name)
        validate_attributes(attributes)

        self.logger = get_logger()
        self.model_name = model_name
        self.attributes: dict[str, Any] = dict(attributes)
        self.current_id = 0
        self.count = 0
        self.associations: list[ObjectFabricator] = []

    def __repr__(self) -> str:
        return (
            f"ObjectFabricator(model_name={self.model_name!r}, current_id={self.current_id}, "
            f"associations={len(self.associations)})"
        )

    @staticmethod
    def sequence(sequence_value_function: Callable[[int], Any]) -> Producer:
        return helpers.sequence(sequence_value_function)

    @staticmethod
    def template(template_value_function: Callable[[Mapping[str, Any]], Any]) -> Producer:
        return helpers.template(template_value_function)

    @staticmethod
    def associate(fabricator: ObjectFabricator, attributes: Mapping[str, Any] | None = None) -> Association:
        return helpers.associate(fabricator, attributes)

    @staticmethod
    def associate_to_many(
        fabricator: ObjectFabricator, count: int, attributes: Mapping[str, Any] | None = None
    ) -> Association:
        return helpers.associate_to_many(fabricator, count, attributes)

    def extend(self, model_name: str = None, attributes: Mapping[str, Any] | None = None) -> Self:
        """부모 템플릿 위에 attributes를 덮어쓴 새 fabricator를 반환합니다.

        새 fabricator는 id와 associations를 따로 가지며, 부모와 연결되지 않습니다.

        Args:
            model_name (str): 새 모델 이름
            attributes (Mapping[str, Any] | None): 덮어쓰거나 추가할 속성

        Returns:
            Self: 새 fabricator
        """
        attributes = {} if attributes is None else attributes
        validate_attributes(attributes)
        return self.__class__(model_name, {**self.attributes, **attributes})

    def generate_id(self) -> None:
        self.current_id += 1

    def increase_count(self) -> None:
        self.count += 1

    def save_to_association(self, fabricator: ObjectFabricator) -> None:
        self.associations.append(fabricator)
        self.logger.debug(f"{fabricator.model_name} associated to {self.model_name}")

    def _fabricate(self, attributes: Mapping[str, Any]) -> dict[str, Any]:
        try:
            fabricated = fabricate_object(self, attributes)
        except Exception as e:
            origin = getattr(e, "fabrication_origin", None)
            if origin is None:
                # traceback은 예외가 처음 발생한 fabricator에서만 남김
                e.fabrication_origin = self.model_name
                self.logger.exception(f"Failed to fabricate {self.model_name} (id: {self.current_id})")
            else:
                self.logger.error(f"Failed to fabricate {self.model_name} (id: {self.current_id}): {origin} failed")
            raise

        self.logger.debug(f"Fabricated {self.model_name} (id: {self.current_id})")
        return fabricated

    def create(self, attributes: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """객체 하나를 생성합니다.

        Args:
            attributes (Mapping[str, Any] | None): 템플릿을 덮어쓰거나 추가할 속성

        Returns:
            dict[str, Any]: 생성된 객체

        Raises:
            InvalidAttributes: attributes가 유효하지 않은 경우
        """
        attributes = {} if attributes is None else attributes
        validate_attributes(attributes)
        return self._fabricate({**self.attributes, **attributes})

    def create_many(self, count: int, attributes: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """객체 count개를 순서대로 생성합니다.

        id와 sequence 값은 배치 전체에 걸쳐 연속으로 증가합니다.

        Args:
            count (int): 생성할 객체 수
            attributes (Mapping[str, Any] | None): 템플릿을 덮어쓰거나 추가할 속성

        Returns:
            list[dict[str, Any]]: 생성된 객체 목록

        Raises:
            InvalidCount: count가 음이 아닌 정수가 아닌 경우
            InvalidAttributes: attributes가 유효하지 않은 경우
        """
        attributes = {} if attributes is None else attributes
        validate_create_many(count, attributes)

        if count == 0:
            self.logger.warning(f"create_many called with count 0 for {self.model_name}")

        merged = {**self.attributes, **attributes}
        return [self._fabricate(merged) for _ in range(count)]

    def clean(self) -> None:
        """연관된 fabricator들을 먼저 초기화한 뒤 current_id를 0으로 되돌립니다.

        associations 목록과 count는 유지됩니다.
        """
        self._clean(cleaning=set())

    def _clean(self, cleaning: set[ObjectFabricator]) -> None:
        cleaning.add(self)

        for association in self.associations:
            if association in cleaning:
                # 순환 연관관계
                self.logger.warning(f"Skipping {association.model_name}: already being cleaned")
                continue
            association._clean(cleaning)

        cleaning.discard(self)
        self.current_id = 0
        self.logger.debug(f"Cleaned {self.model_name}")
