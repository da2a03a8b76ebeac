"""JSON-file-backed implementation of SaleRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from velas.domain.model.sale import PaymentMethod, Sale, SaleLineItem, SaleStatus
from velas.domain.model.value_objects import Money, Quantity
from velas.domain.repository.sale_repository import SaleRepository
from velas.infrastructure.persistence.json_file import JsonFile


class JsonSaleRepository(SaleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- SaleRepository interface ---------------------------------------------

    def next_id(self) -> int:
        sales = self._file.read()
        if not sales:
            return 1
        return max(s["id"] for s in sales) + 1

    def get_by_id(self, sale_id: int) -> Sale | None:
        for raw in self._file.read():
            if raw["id"] == sale_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Sale]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, sale: Sale) -> None:
        with self._file.lock:
            sales = self._file.read()

            if sale.id is None:
                sale.id = self.next_id()

            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(sales):
                if raw["id"] == sale.id:
                    sales[i] = self._to_raw(sale)
                    break
            else:
                sales.append(self._to_raw(sale))

            self._file.write(sales)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        return {
            "id": sale.id,
            "customer_id": sale.customer_id,
            "customer_name": sale.customer_name,
            "status": sale.status.value,
            "payment_method": sale.payment_method.value if sale.payment_method else None,
            "sale_date": sale.sale_date.isoformat(),
            "subtotal": str(sale.subtotal.amount),
            "discount_percentage": str(sale.discount_percentage),
            "discount_amount": str(sale.discount_amount.amount),
            "total_amount": str(sale.total_amount.amount),
            "jar_credits_used": sale.jar_credits_used,
            "notes": sale.notes,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in sale.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        items = [
            SaleLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"])),
            )
            for i in raw["items"]
        ]
        method = raw.get("payment_method")
        return Sale(
            id=raw["id"],
            customer_id=raw["customer_id"],
            customer_name=raw["customer_name"],
            items=items,
            subtotal=Money(Decimal(raw["subtotal"])),
            discount_amount=Money(Decimal(raw["discount_amount"])),
            discount_percentage=Decimal(raw["discount_percentage"]),
            total_amount=Money(Decimal(raw["total_amount"])),
            jar_credits_used=raw.get("jar_credits_used", 0),
            status=SaleStatus(raw["status"]),
            payment_method=PaymentMethod(method) if method else None,
            notes=raw.get("notes", ""),
            sale_date=datetime.fromisoformat(raw["sale_date"]),
        )
