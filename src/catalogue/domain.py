"""Catalogue bounded context: hand-made articles and their color variants.

Products carry multilingual titles, descriptions and color labels (English,
French, Arabic). The ordering context reads prices, titles, cover images and
colors from here; it never writes.
"""

import structlog
from protean.domain import Domain

catalogue = Domain(name="catalogue")

logger = structlog.get_logger(__name__)
