# shopcart/domain/enums.py
from enum import Enum


class OrderStatus(str, Enum):
    #pozostale statusy obsluguje realizacja zamowien, nie koszyk
    PENDING = "pending"
