#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from shopcart.data.models.product import ProductModel
from shopcart.data.models.discount_code import DiscountCodeModel
from shopcart.data.models.order import OrderModel
from shopcart.data.models.order_item import OrderItemModel

__all__ = ["ProductModel", "DiscountCodeModel", "OrderModel", "OrderItemModel"]
