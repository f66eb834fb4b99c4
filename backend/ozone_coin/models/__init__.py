from ozone_coin.models.class_group import ClassGroupRecord
from ozone_coin.models.student import StudentRecord

__all__ = [
    "ClassGroupRecord",
    "StudentRecord",
]
