"""
Filter and pagination state for the staff transaction screen.

All filtering and aggregation happens on the server; this module only
composes query parameters and re-issues the query whenever they change.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from evservice.errors import ApiError
from evservice.schemas.transaction import RefundRequest, Transaction

logger = logging.getLogger(__name__)

LOAD_FAILED = "Không thể tải giao dịch"
STATS_FAILED = "Không thể tải thống kê giao dịch"
REFUND_OK = "Hoàn tiền thành công"
REFUND_FAILED = "Không thể hoàn tiền"


class TransactionFilters(BaseModel):
    """Query filters; empty values are never sent."""
    status: Optional[str] = None
    transaction_type: Optional[str] = Field(default=None, alias="transactionType")
    payment_purpose: Optional[str] = Field(default=None, alias="paymentPurpose")
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    search: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    appointment_id: Optional[str] = Field(default=None, alias="appointmentId")
    invoice_id: Optional[str] = Field(default=None, alias="invoiceId")

    model_config = ConfigDict(populate_by_name=True)

    def to_params(self) -> Dict[str, Any]:
        params = {}
        for key, value in self.model_dump(by_alias=True).items():
            if value is None:
                continue
            if isinstance(value, str):
                value = value.strip()
                if not value:
                    continue
            params[key] = value
        return params


class Pagination(BaseModel):
    page: int = 1
    limit: int = 20
    total: int = 0
    pages: int = 0

    @property
    def has_next(self) -> bool:
        return self.page < self.pages


class TransactionBrowser:
    """Controlled list of transactions driven by filters and a page cursor."""

    def __init__(self, api, filters: Optional[TransactionFilters] = None, limit: int = 20):
        self.api = api
        self.filters = filters or TransactionFilters()
        self.pagination = Pagination(limit=limit)
        self.transactions: List[Transaction] = []
        self.stats: Optional[dict] = None
        self.error: Optional[str] = None
        self.loading = False

    def fetch(self, page: int = 1) -> List[Transaction]:
        self.loading = True
        self.error = None
        params = {"page": page, "limit": self.pagination.limit}
        params.update(self.filters.to_params())
        logger.debug("Fetching transactions with %s", params)

        try:
            response = self.api.transactions.list(params)
        except ApiError as exc:
            logger.error("Error fetching transactions: %s", exc)
            self.transactions = []
            self.error = exc.server_message or LOAD_FAILED
            self.api.notifier.error(LOAD_FAILED)
            return self.transactions
        finally:
            self.loading = False

        data = response.data if isinstance(response.data, dict) else {}
        items = (data.get("transactions") or []) if response.success else []
        self.transactions = self._parse(items)
        self._update_pagination(page, data.get("pagination"))
        return self.transactions

    @staticmethod
    def _parse(items) -> List[Transaction]:
        parsed = []
        for item in items:
            try:
                parsed.append(Transaction.model_validate(item))
            except ValidationError:
                logger.debug("Skipping malformed transaction: %r", item)
        return parsed

    def _update_pagination(self, page: int, server: Any) -> None:
        update = {"page": page}
        if isinstance(server, dict):
            for key in ("total", "pages"):
                if isinstance(server.get(key), int):
                    update[key] = server[key]
            if isinstance(server.get("page"), int):
                update["page"] = server["page"]
        elif len(self.transactions) == self.pagination.limit:
            # No pagination block: a full page means there may be more.
            update["pages"] = page + 1
        else:
            update["pages"] = page
        self.pagination = self.pagination.model_copy(update=update)

    @property
    def has_next(self) -> bool:
        return self.pagination.has_next

    def apply(self, **changes) -> List[Transaction]:
        """Change filters and reload from the first page."""
        unknown = set(changes) - set(TransactionFilters.model_fields)
        if unknown:
            raise ValueError(f"Unknown transaction filters: {', '.join(sorted(unknown))}")
        self.filters = self.filters.model_copy(update=changes)
        return self.fetch(1)

    def next_page(self) -> List[Transaction]:
        return self.fetch(self.pagination.page + 1)

    def previous_page(self) -> List[Transaction]:
        return self.fetch(max(1, self.pagination.page - 1))

    def reset(self) -> List[Transaction]:
        self.filters = TransactionFilters()
        return self.fetch(1)

    def fetch_stats(self) -> Optional[dict]:
        try:
            response = self.api.transactions.statistics(self.filters.to_params())
        except ApiError as exc:
            logger.error("Error fetching transaction stats: %s", exc)
            self.stats = None
            self.api.notifier.error(STATS_FAILED)
            return None
        self.stats = response.unwrap("statistics") if response.success else None
        return self.stats

    def refund(self, transaction_id: str, reason: str, amount: Optional[float] = None) -> Any:
        """
        Refund a transaction, then reload the current page.

        Invalid input raises pydantic's ValidationError before any request.
        """
        refund = RefundRequest(amount=amount, reason=reason)
        try:
            response = self.api.transactions.refund(transaction_id, refund)
        except ApiError:
            self.api.notifier.error(REFUND_FAILED)
            raise
        self.api.notifier.success(REFUND_OK)
        self.fetch(self.pagination.page)
        return response
