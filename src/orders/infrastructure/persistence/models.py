"""SQLAlchemy ORM models.

Map the User / Order / Product entities to tables, plus the order lines
that keep each order's product sequence.  These classes are a
storage format only; the domain never sees them.  ``mappers.py``
translates in both directions.
"""

from __future__ import annotations

from sqlalchemy import Column, Enum, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import declarative_base, relationship

from orders.domain.model.value_objects import OrderStatus

Base = declarative_base()


class UserModel(Base):

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False)

    orders = relationship(
        "OrderModel",
        back_populates="user",
        cascade="all",
        passive_deletes=True,
        order_by="OrderModel.position",
    )

    def __repr__(self):
        return f"<UserModel(id={self.id}, name={self.name})>"


class OrderModel(Base):

    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Stored by value ("Completed"), never by ordinal.
    status = Column(
        Enum(
            OrderStatus,
            native_enum=False,
            length=50,
            values_callable=lambda statuses: [s.value for s in statuses],
            validate_strings=True,
        ),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    total = Column(Numeric(18, 2, asdecimal=True), nullable=False)
    # Insertion order within the user's order list.
    position = Column(Integer, nullable=False, default=0)

    user = relationship("UserModel", back_populates="orders")
    products = relationship(
        "ProductModel",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    # The product sequence as added; a product added twice has two lines.
    lines = relationship(
        "OrderLineModel",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderLineModel.position",
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, status={self.status}, total={self.total})>"


class ProductModel(Base):

    __tablename__ = "products"

    id = Column(Uuid, primary_key=True)
    order_id = Column(
        Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(100), nullable=False)
    price = Column(Numeric(18, 2, asdecimal=True), nullable=False)

    order = relationship("OrderModel", back_populates="products")

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, price={self.price})>"


class OrderLineModel(Base):
    """One entry in an order's product sequence."""

    __tablename__ = "order_lines"

    order_id = Column(
        Uuid, ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True
    )
    position = Column(Integer, primary_key=True)
    product_id = Column(
        Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )

    order = relationship("OrderModel", back_populates="lines")
    product = relationship("ProductModel")

    def __repr__(self):
        return f"<OrderLineModel(order_id={self.order_id}, position={self.position})>"
