"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from myshop.domain.exceptions import EntityNotFoundError
from myshop.domain.model.order import Order, OrderLineItem, OrderStatus
from myshop.domain.model.value_objects import DEFAULT_CURRENCY, Address, Money, Quantity
from myshop.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        with self._lock:
            records = self._load_raw()
        for raw in records:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        with self._lock:
            records = self._load_raw()
        return [self._to_domain(raw) for raw in records]

    def add(self, order: Order) -> Order:
        with self._lock:
            orders = self._load_raw()
            order.id = max((o["id"] for o in orders), default=0) + 1
            orders.append(self._to_raw(order))
            self._persist_raw(orders)
        return order

    def update(self, order: Order) -> None:
        with self._lock:
            orders = self._load_raw()
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    self._persist_raw(orders)
                    return
        raise EntityNotFoundError(f"Order #{order.id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        address = order.shipping_address
        return {
            "id": order.id,
            "customer_email": order.customer_email,
            "shipping_address": {
                "street": address.street,
                "city": address.city,
                "state": address.state,
                "zip_code": address.zip_code,
                "country": address.country,
            },
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "currency": order.currency,
            "shipping_cost": str(order.shipping_cost.amount),
            "discount": str(order.discount.amount),
            "payment_reference": order.payment_reference,
            "items": [
                {
                    "id": item.id,
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        items = [
            OrderLineItem(
                id=i["id"],
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_email=raw["customer_email"],
            shipping_address=Address(**raw["shipping_address"]),
            items=items,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            currency=currency,
            shipping_cost=Money(Decimal(raw["shipping_cost"]), currency),
            discount=Money(Decimal(raw["discount"]), currency),
            payment_reference=raw.get("payment_reference"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        # Write a sibling temp file and swap it in so readers in other
        # processes never see a truncated file.
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(orders, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
