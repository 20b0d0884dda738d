"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from decimal import Decimal
from pathlib import Path

from myshop.domain.exceptions import ConcurrencyError, EntityNotFoundError
from myshop.domain.model.product import Product
from myshop.domain.model.value_objects import DEFAULT_CURRENCY, Money
from myshop.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            records = self._load_raw()
        for raw in records:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        with self._lock:
            records = self._load_raw()
        return [self._to_domain(raw) for raw in records]

    def add(self, product: Product) -> Product:
        with self._lock:
            records = self._load_raw()
            product.id = max((r["id"] for r in records), default=0) + 1
            product.version = 1
            records.append(self._to_raw(product))
            self._persist_raw(records)
        return product

    def update(self, product: Product) -> None:
        # Compare-and-swap on the version stamp; the lock makes the
        # read-check-write atomic within this process.
        with self._lock:
            records = self._load_raw()
            for i, raw in enumerate(records):
                if raw["id"] != product.id:
                    continue
                if raw.get("version", 0) != product.version:
                    raise ConcurrencyError(
                        f"Product '{product.name}' was modified concurrently "
                        f"(expected version {product.version}, "
                        f"found {raw.get('version', 0)})"
                    )
                product.version += 1
                records[i] = self._to_raw(product)
                self._persist_raw(records)
                return
        raise EntityNotFoundError(f"Product with ID {product.id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock_quantity": product.stock_quantity,
            "is_active": product.is_active,
            "version": product.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", DEFAULT_CURRENCY)),
            stock_quantity=raw["stock_quantity"],
            is_active=raw.get("is_active", True),
            version=raw.get("version", 0),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        # Write a sibling temp file and swap it in so readers in other
        # processes never see a truncated file.
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(records, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
