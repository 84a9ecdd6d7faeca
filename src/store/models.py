# provide dataclass models

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

LessonId = Union[str, int]

PLACEHOLDER_IMAGE = "placeholder.jpg"


@dataclass
class Lesson:
    id: LessonId
    subject: str
    location: str
    price: float
    spaces: int  # remaining seats, never negative
    image: str = PLACEHOLDER_IMAGE


@dataclass(frozen=True)
class CartItem:
    lesson_id: LessonId
    subject: str
    location: str
    price: float
    image: str

    @classmethod
    def from_lesson(cls, lesson: Lesson) -> "CartItem":
        return cls(
            lesson_id=lesson.id,
            subject=lesson.subject,
            location=lesson.location,
            price=lesson.price,
            image=lesson.image,
        )


@dataclass
class ContactInfo:
    name: str = ""
    phone: str = ""

    def clear(self) -> None:
        self.name = ""
        self.phone = ""


@dataclass(frozen=True)
class OrderLine:
    lesson_id: LessonId
    subject: str
    price: float


@dataclass(frozen=True)
class Order:
    name: str
    phone: str
    items: Tuple[OrderLine, ...] = field(default_factory=tuple)
    total: float = 0

    def to_payload(self) -> Dict[str, Any]:
        """Request body for the order endpoint."""
        return {
            "name": self.name,
            "phone": self.phone,
            "items": [
                {"lessonId": line.lesson_id, "subject": line.subject, "price": line.price}
                for line in self.items
            ],
            "total": self.total,
        }


@dataclass(frozen=True)
class SortSpec:
    field: str = "subject"
    ascending: bool = True
