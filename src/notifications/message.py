"""Outbound message objects handed from resolvers to dispatch."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressNotification:
    """A fully rendered production-progress email for one line item."""

    to: str
    customer_name: str
    short_order_id: str
    product_title: str
    color_label: str
    progress: int
    article_index: int | None
    subject: str
    body_fr: str
    body_ar: str
    html_body: str

    @property
    def body(self) -> str:
        """Plain-text alternative: French then Arabic."""
        return f"{self.body_fr}\n\n---\n\n{self.body_ar}"
