"""
Shapes of the entities kept in the stores. Entities are plain dicts so payload
fields the API does not validate (extra keys on order lines) are carried through.
"""
from typing import Literal, NotRequired, TypedDict

OrderStatus = Literal[
    "pending",
    "preparing",
    "out-for-delivery",
    "delivered",
]


class Dish(TypedDict):
    id: str
    name: str
    description: str
    price: int
    image_url: str


class OrderLine(TypedDict, total=False):
    dishId: str
    quantity: int


class Order(TypedDict):
    id: str
    deliverTo: str
    mobileNumber: str
    dishes: list[OrderLine]
    status: NotRequired[OrderStatus]
