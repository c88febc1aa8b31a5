from enum import Enum


class AttributeKind(Enum):
    PRODUCER = "PRODUCER"
    SEQUENCE = "SEQUENCE"
    TEMPLATE = "TEMPLATE"


class Multiplicity(Enum):
    ONE = "ONE"
    MANY = "MANY"
