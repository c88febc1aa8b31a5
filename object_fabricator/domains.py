from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping, Union

from object_fabricator.enums import AttributeKind, Multiplicity
from object_fabricator.errors import InvalidAttributeValue

if TYPE_CHECKING:
    from object_fabricator.fabricator import ObjectFabricator


@dataclass(frozen=True)
class LiteralValue:
    """템플릿에 그대로 복사되는 문자열/불리언 값"""

    value: str | bool

    def __post_init__(self):
        if not isinstance(self.value, (str, bool)):
            raise InvalidAttributeValue(None, self.value)


@dataclass(frozen=True)
class Producer:
    """FabricationContext를 받아 값을 만들어내는 함수.

    sequence, template 헬퍼 모두 같은 호출 규약을 사용하며,
    kind는 로그/디버깅 용도로만 사용됩니다.

    Attributes:
        func (Callable[[FabricationContext], Any]): 값 생성 함수
        kind (AttributeKind): PRODUCER, SEQUENCE, TEMPLATE 중 하나
    """

    func: Callable[[FabricationContext], Any]
    kind: AttributeKind = AttributeKind.PRODUCER

    def __post_init__(self):
        if not callable(self.func):
            raise InvalidAttributeValue(None, self.func)

    def __call__(self, context: FabricationContext) -> Any:
        return self.func(context)


@dataclass(frozen=True)
class Association:
    """다른 fabricator로 생성되는 속성.

    해석 시점에 부모 fabricator의 associations에 자식을 등록한 뒤,
    자식 fabricator로 객체(ONE) 또는 객체 목록(MANY)을 생성합니다.
    생성 시점에 모든 값을 검증하므로, 해석 중에는 검증 오류가 발생하지 않습니다.

    Attributes:
        fabricator (ObjectFabricator): 자식 fabricator
        overrides (Mapping[str, Any]): 자식 생성 시 덮어쓸 속성
        multiplicity (Multiplicity): ONE 또는 MANY
        count (int | None): MANY인 경우 생성할 개수

    Raises:
        InvalidAssociation: fabricator가 ObjectFabricator가 아닌 경우
        InvalidAttributes: overrides가 유효하지 않은 경우
        InvalidCount: MANY인데 count가 음이 아닌 정수가 아닌 경우
    """

    fabricator: ObjectFabricator
    overrides: Mapping[str, Any] = field(default_factory=dict)
    multiplicity: Multiplicity = Multiplicity.ONE
    count: int | None = None

    def __post_init__(self):
        from object_fabricator.validation import validate_attributes, validate_count, validate_fabricator

        validate_fabricator(self.fabricator)
        overrides = {} if self.overrides is None else self.overrides
        validate_attributes(overrides)
        if not isinstance(self.multiplicity, Multiplicity):
            raise ValueError(f"multiplicity must be a Multiplicity, but received: {self.multiplicity!r}")
        if self.multiplicity is Multiplicity.MANY:
            validate_count(self.count)

        # 호출자가 넘긴 매핑과 분리
        object.__setattr__(self, "overrides", dict(overrides))


AttributeSpec = Union[LiteralValue, Producer, Association]


@dataclass
class FabricationContext:
    """객체 하나를 만드는 동안만 유지되는 빌더 상태.

    fabricate_object 호출마다 새로 만들어지며, 호출이 끝나면 버려집니다.
    attributes는 지금까지 해석된 속성만 담고 있으므로 template 헬퍼는
    자기 자신이나 뒤에 선언된 키를 볼 수 없습니다.
    """

    fabricator: ObjectFabricator
    current_id: int
    _attributes: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def model_name(self) -> str:
        return self.fabricator.model_name

    @property
    def attributes(self) -> Mapping[str, Any]:
        # 호출 시점의 스냅샷
        return MappingProxyType(dict(self._attributes))

    def set(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    def to_object(self, id_field: str) -> dict[str, Any]:
        return {id_field: self.current_id, **self._attributes}
