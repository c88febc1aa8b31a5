from object_fabricator.config import FabricatorSettings, get_settings, init_settings, reset_settings
from object_fabricator.domains import Association, FabricationContext, LiteralValue, Producer
from object_fabricator.enums import AttributeKind, Multiplicity
from object_fabricator.errors import (
    FabricatorError,
    InvalidAssociation,
    InvalidAttributes,
    InvalidAttributeValue,
    InvalidCount,
    InvalidModelName,
)
from object_fabricator.fabricator import ObjectFabricator
from object_fabricator.helpers import associate, associate_to_many, sequence, template

__all__ = [
    "ObjectFabricator",
    "sequence",
    "template",
    "associate",
    "associate_to_many",
    "Association",
    "AttributeKind",
    "FabricationContext",
    "LiteralValue",
    "Multiplicity",
    "Producer",
    "FabricatorSettings",
    "init_settings",
    "get_settings",
    "reset_settings",
    "FabricatorError",
    "InvalidAssociation",
    "InvalidAttributes",
    "InvalidAttributeValue",
    "InvalidCount",
    "InvalidModelName",
]
