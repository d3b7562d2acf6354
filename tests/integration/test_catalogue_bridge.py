"""The ordering context's view of live catalogue products."""

from ordering.catalog.catalogue_adapter import CatalogueDomainAdapter
from ordering.order.colors import normalize_line_item
from ordering.order.reconciliation import fetch_prices

BLUE = {"en": "Blue", "fr": "Bleu", "ar": "أزرق"}


class TestCatalogueDomainAdapter:
    def test_find_by_id(self, catalogue_ctx, stored_product):
        adapter = CatalogueDomainAdapter(catalogue_ctx)

        product = adapter.find_product_by_id(str(stored_product.id))

        assert product.title == "Embroidered Jebba"
        assert product.price == 390.0
        assert product.cover_image == "/uploads/jebba-red.png"

    def test_unknown_id_is_none(self, catalogue_ctx):
        assert CatalogueDomainAdapter(catalogue_ctx).find_product_by_id("missing") is None

    def test_batch_lookup_skips_missing_ids(self, catalogue_ctx, stored_product):
        adapter = CatalogueDomainAdapter(catalogue_ctx)

        products = adapter.find_products_by_ids([str(stored_product.id), "missing"])

        assert [p.product_id for p in products] == [str(stored_product.id)]

    def test_prices_feed_reconciliation(self, catalogue_ctx, stored_product):
        prices = fetch_prices(CatalogueDomainAdapter(catalogue_ctx), [stored_product.id, stored_product.id])
        assert prices == {str(stored_product.id): 390.0}


class TestNormalizationAgainstLiveCatalogue:
    def test_multilingual_color_is_kept_verbatim(self, catalogue_ctx, stored_product):
        product = CatalogueDomainAdapter(catalogue_ctx).find_product_by_id(str(stored_product.id))
        entry = {
            "product_id": str(stored_product.id),
            "quantity": 2,
            "color": {"color_name": BLUE, "image": "/uploads/jebba-blue.png"},
        }

        item = normalize_line_item(entry, product)

        assert item["color"] == {"en": "Blue", "fr": "Bleu", "ar": "أزرق"}
        assert item["image"] == "/uploads/jebba-blue.png"

    def test_bare_label_falls_back_to_catalogue_cover(self, catalogue_ctx, stored_product):
        product = CatalogueDomainAdapter(catalogue_ctx).find_product_by_id(str(stored_product.id))

        item = normalize_line_item({"product_id": str(stored_product.id), "quantity": 1, "color": "Bleu"}, product)

        assert item["color"] == {"en": "Bleu", "fr": "Bleu", "ar": "أصلي"}
        assert item["image"] == "/uploads/jebba-red.png"
