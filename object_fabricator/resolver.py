from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from object_fabricator.config import get_settings
from object_fabricator.domains import Association, AttributeSpec, FabricationContext, LiteralValue, Producer
from object_fabricator.enums import Multiplicity

if TYPE_CHECKING:
    from object_fabricator.fabricator import ObjectFabricator


def resolve_association(association: Association, parent: ObjectFabricator) -> dict[str, Any] | list[dict[str, Any]]:
    """연관관계 속성을 해석합니다.

    자식 fabricator를 부모의 associations에 먼저 등록한 뒤 자식 객체를 생성합니다.
    같은 자식이 여러 번 해석되면 그만큼 여러 번 등록됩니다.

    Args:
        association (Association): 해석할 연관관계
        parent (ObjectFabricator): 객체를 만들고 있는 부모 fabricator

    Returns:
        dict[str, Any] | list[dict[str, Any]]: ONE이면 객체 하나, MANY이면 객체 목록
    """
    child = association.fabricator
    parent.save_to_association(child)

    if association.multiplicity is Multiplicity.MANY:
        return child.create_many(association.count, association.overrides)
    return child.create(association.overrides)


def resolve_one(spec: AttributeSpec | Any, context: FabricationContext) -> Any:
    if isinstance(spec, Association):
        return resolve_association(spec, context.fabricator)
    if isinstance(spec, Producer):
        return spec(context)
    if isinstance(spec, LiteralValue):
        return spec.value
    if callable(spec):
        # 헬퍼 없이 템플릿에 넣은 함수
        return spec(context)
    return spec


def fabricate_object(fabricator: ObjectFabricator, attributes: Mapping[str, Any]) -> dict[str, Any]:
    """병합된 템플릿으로 객체 하나를 만듭니다.

    id는 호출마다 정확히 한 번 증가하며, 속성은 선언 순서대로 해석됩니다.
    해석된 값은 즉시 context에 기록되므로 뒤쪽 template 헬퍼는 앞쪽 값만 볼 수 있습니다.

    Args:
        fabricator (ObjectFabricator): 객체를 만드는 fabricator
        attributes (Mapping[str, Any]): 템플릿과 override가 병합된 속성

    Returns:
        dict[str, Any]: {id, **resolved_attributes}
    """
    fabricator.generate_id()
    context = FabricationContext(fabricator=fabricator, current_id=fabricator.current_id)

    for key, spec in attributes.items():
        context.set(key, resolve_one(spec, context))

    fabricator.increase_count()
    return context.to_object(get_settings().id_field)
