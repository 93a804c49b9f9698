# app/services/invoice_service.py
import io
import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, List, Tuple

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.domain.exceptions import ForbiddenError, NotFoundError, UpstreamError
from app.repos.order_repo import OrderRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

_MARGIN = 72
_CHUNK_SIZE = 64 * 1024


def invoice_name(order_id: int) -> str:
    return f"invoice-{order_id}.pdf"


def invoice_lines(order: OrderModel) -> Tuple[List[str], Decimal]:
    """Printable lines of an order, in stored sequence, and their total."""
    lines = []
    total = Decimal("0.00")
    for item in order.items:
        total += item.quantity * item.price
        lines.append(f"{item.title} - {item.quantity} x {item.price:.2f}")
    return lines, total


class _TeeSink:
    """File-like object copying every write to all sinks."""

    def __init__(self, name: str, *sinks):
        self.name = name
        self.sinks = sinks

    def write(self, data: bytes) -> int:
        for sink in self.sinks:
            sink.write(data)
        return len(data)

    def flush(self) -> None:
        for sink in self.sinks:
            sink.flush()


@dataclass(frozen=True)
class RenderedInvoice:
    name: str
    path: str
    content: bytes

    def iter_chunks(self) -> Iterator[bytes]:
        for start in range(0, len(self.content), _CHUNK_SIZE):
            yield self.content[start:start + _CHUNK_SIZE]


class InvoiceService:
    def __init__(self, db: Session, invoice_dir: str):
        self.repo = OrderRepo(db)
        self.invoice_dir = invoice_dir

    def render_invoice(self, order_id: int, requesting_user_id: int) -> RenderedInvoice:
        try:
            order = self.repo.get_order(order_id)
        except SQLAlchemyError as e:
            logger.error(f"Loading order {order_id} failed: {e}")
            raise UpstreamError("Could not load order") from e

        if order is None:
            raise NotFoundError("No order found.")

        if order.user_id != requesting_user_id:
            logger.warning(f"User {requesting_user_id} asked for invoice of order {order_id} owned by {order.user_id}")
            raise ForbiddenError("Unauthorized")

        name = invoice_name(order.id)
        path = os.path.join(self.invoice_dir, name)
        tmp_path = path + ".tmp"

        # the invoice file only appears once the whole document was written
        body = io.BytesIO()
        try:
            os.makedirs(self.invoice_dir, exist_ok=True)
            with open(tmp_path, "wb") as fh:
                self._draw(order, _TeeSink(name, fh, body))
            os.replace(tmp_path, path)
        except Exception as e:
            logger.error(f"Rendering invoice {name} failed: {e}")
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise UpstreamError("Could not render invoice") from e

        logger.info(f"Invoice {name} written to {path}")
        return RenderedInvoice(name=name, path=path, content=body.getvalue())

    @staticmethod
    def _draw(order: OrderModel, sink: _TeeSink) -> None:
        lines, total = invoice_lines(order)

        pdf = canvas.Canvas(sink, pagesize=A4, pageCompression=0)
        pdf.setTitle(f"Invoice {order.id}")
        _, height = A4
        y = height - _MARGIN

        pdf.setFont("Helvetica", 26)
        pdf.drawString(_MARGIN, y, "Invoice")
        pdf.line(_MARGIN, y - 4, _MARGIN + pdf.stringWidth("Invoice", "Helvetica", 26), y - 4)
        y -= 32
        pdf.drawString(_MARGIN, y, "----------------------------")
        y -= 32

        pdf.setFont("Helvetica", 14)
        for line in lines:
            if y < _MARGIN:
                pdf.showPage()
                pdf.setFont("Helvetica", 14)
                y = height - _MARGIN
            pdf.drawString(_MARGIN, y, line)
            y -= 20

        pdf.drawString(_MARGIN, y, "----")
        y -= 20
        pdf.drawString(_MARGIN, y, f"Total Price {total:.2f}")

        pdf.showPage()
        pdf.save()
