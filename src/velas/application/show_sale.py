"""Application service: Show Sale use case (query)."""

from __future__ import annotations

from velas.application.dto import SaleDTO
from velas.domain.exceptions import EntityNotFoundError
from velas.domain.model.sale import SaleStatus
from velas.domain.repository.sale_repository import SaleRepository


class ShowSaleHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, sale_id: int) -> SaleDTO:
        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale #{sale_id} not found")
        return SaleDTO.from_sale(sale)

    def list(self, status: SaleStatus | None = None) -> list[SaleDTO]:
        return [
            SaleDTO.from_sale(sale)
            for sale in self._sale_repo.list_all()
            if status is None or sale.status == status
        ]
