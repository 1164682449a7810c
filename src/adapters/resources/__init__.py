"""Operaciones por recurso (mixins sobre `BaseLemonSqueezyClient`).

Por qué un paquete:
- Un módulo por recurso de la API, igual de pequeño y predecible.
- `LemonSqueezyClient` los compone; se pueden usar sueltos en tests.
"""

from adapters.resources.files import FilesAPI
from adapters.resources.order_items import OrderItemsAPI
from adapters.resources.orders import OrdersAPI
from adapters.resources.products import ProductsAPI
from adapters.resources.stores import StoresAPI
from adapters.resources.subscriptions import SubscriptionsAPI
from adapters.resources.users import UsersAPI
from adapters.resources.variants import VariantsAPI

__all__ = [
	"FilesAPI",
	"OrderItemsAPI",
	"OrdersAPI",
	"ProductsAPI",
	"StoresAPI",
	"SubscriptionsAPI",
	"UsersAPI",
	"VariantsAPI",
]
