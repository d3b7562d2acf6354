import pytest
from catalogue.translation import set_translator
from catalogue.translation.fake_adapter import FakeTranslator
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def catalogue_bed():
    from catalogue.domain import catalogue

    bed = DomainFixture(catalogue)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(catalogue_bed):
    with catalogue_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def translator():
    """Translator that knows the French and Arabic for a few test phrases."""
    fake = FakeTranslator(
        {
            ("Red", "fr"): "Rouge",
            ("Red", "ar"): "أحمر",
            ("Blue", "fr"): "Bleu",
            ("Blue", "ar"): "أزرق",
            ("Embroidered Jebba", "fr"): "Jebba brodée",
            ("Embroidered Jebba", "ar"): "جبة مطرزة",
        }
    )
    set_translator(fake)
    return fake


@pytest.fixture()
def product_payload():
    return {
        "title": "Embroidered Jebba",
        "description": "Hand-stitched ceremonial jebba",
        "category": "jebba",
        "colors": [
            {"color_name": "Red", "image": "/uploads/jebba-red.png"},
            {"color_name": "Blue", "image": "/uploads/jebba-blue.png"},
        ],
        "old_price": 450.0,
        "new_price": 390.0,
    }
