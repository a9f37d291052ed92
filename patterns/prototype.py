"""
Prototype pattern: products and orders that produce independent copies.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Tuple
from utils.logging_config import get_logger

logger = get_logger(__name__)


def _format_number(value: float) -> str:
    # Six significant digits, no trailing zeros: 1200, 12.5, 1.23457e+06
    return f"{value:g}"


class Prototype(ABC):
    """Abstract prototype base class."""

    @abstractmethod
    def clone(self) -> 'Prototype':
        """Return an independent copy of this object."""
        pass


@dataclass
class Product(Prototype):
    """A named, priced item that can be copied into orders."""
    name: str
    price: float

    def clone(self) -> 'Product':
        return Product(self.name, self.price)

    def describe(self) -> str:
        return f"Product: {self.name}, Price: {_format_number(self.price)}"

    def display(self):
        print(self.describe())


class Order(Prototype):
    """
    An order that exclusively owns copies of the products added to it.

    ``add_product`` stores a clone, never the caller's object, so products are
    never shared between orders or between an order and its caller.
    """

    def __init__(
        self,
        shipping_cost: float,
        discount: float,
        payment_method: str,
        products: Iterable[Product] = ()
    ):
        self.shipping_cost = shipping_cost
        self.discount = discount
        self.payment_method = payment_method
        self._products: List[Product] = []
        self.logger = get_logger(self.__class__.__name__)
        for product in products:
            self.add_product(product)

    @property
    def products(self) -> Tuple[Product, ...]:
        """Products owned by this order, in insertion order."""
        return tuple(self._products)

    def add_product(self, product: Product):
        """Add a private copy of ``product`` to the order."""
        self._products.append(product.clone())
        self.logger.debug(f"Added product: {product.name}")

    def clone(self) -> 'Order':
        """
        Copy the order and every product it owns.

        The copy's products are fresh clones, distinct from both this order's
        products and the objects originally passed to ``add_product``.
        """
        new_order = Order(self.shipping_cost, self.discount, self.payment_method)
        for product in self._products:
            new_order.add_product(product)
        self.logger.debug(f"Cloned order with {len(self._products)} products")
        return new_order

    def describe(self) -> List[str]:
        lines = ["Order details:"]
        lines.extend(product.describe() for product in self._products)
        lines.append(
            f"Shipping Cost: {_format_number(self.shipping_cost)}, "
            f"Discount: {_format_number(self.discount)}, "
            f"Payment: {self.payment_method}"
        )
        return lines

    def display(self):
        for line in self.describe():
            print(line)

    def __len__(self) -> int:
        return len(self._products)

    def __repr__(self) -> str:
        return (
            f"Order(shipping_cost={self.shipping_cost!r}, discount={self.discount!r}, "
            f"payment_method={self.payment_method!r}, products={self._products!r})"
        )
