import json

import pytest
from notifications.channel import set_email_channel
from notifications.channel.fake_email import FakeEmailAdapter
from ordering.catalog import set_catalog
from ordering.catalog.fake_adapter import FakeCatalog
from protean import current_domain
from protean.integrations.pytest import DomainFixture

RED = {"en": "Red", "fr": "Rouge", "ar": "أحمر"}
BLUE = {"en": "Blue", "fr": "Bleu", "ar": "أزرق"}


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def catalog():
    """In-memory catalogue: P1 at 100.0 and P2 at 40.0."""
    fake = FakeCatalog()
    fake.add_product("P1", price=100.0, title="Embroidered Jebba", cover_image="/uploads/p1-cover.png")
    fake.add_product("P2", price=40.0, title="Silk Chechia", cover_image="/uploads/p2-cover.png")
    set_catalog(fake)
    return fake


@pytest.fixture(autouse=True)
def email_channel():
    fake = FakeEmailAdapter()
    set_email_channel(fake)
    return fake


@pytest.fixture()
def entry():
    """Build a submitted order entry with a complete multilingual color."""

    def _entry(product_id="P1", quantity=1, color="red"):
        labels = {"red": RED, "blue": BLUE}[color]
        return {
            "product_id": product_id,
            "quantity": quantity,
            "color": {"color_name": labels, "image": f"/uploads/{product_id.lower()}-{color}.png"},
        }

    return _entry


@pytest.fixture()
def place_order():
    """Create an order through the command pipeline and return the loaded aggregate."""
    from ordering.order.creation import CreateOrder
    from ordering.order.order import Order

    def _place(*entries, customer_name="Amira Ben Salah", email="amira@example.com", **kwargs):
        order_id = current_domain.process(
            CreateOrder(
                customer_name=customer_name,
                email=email,
                products=json.dumps(list(entries), ensure_ascii=False),
                **kwargs,
            ),
            asynchronous=False,
        )
        return current_domain.repository_for(Order).get(order_id)

    return _place
