"""
==============================================================================
Product Seed Loader
==============================================================================

Reads the catalog seed file used to populate an empty store.

JSON Structure:
--------------
[
  {"code": "P100", "name": "...", "description": "...", "price": 34.0},
  ...
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


def load_products(products_file: Path) -> List[Product]:
    """
    Load products from a JSON seed file.

    Entries that fail validation are skipped with a warning. Prices are
    parsed as decimals so they are stored exactly.

    Args:
        products_file: Path to products.json

    Returns:
        Products in file order

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the top-level JSON value is not a list
    """
    try:
        with products_file.open("r", encoding="utf-8") as f:
            data = json.load(f, parse_float=str)
    except FileNotFoundError:
        logger.error(f"Products file not found: {products_file}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {products_file}: {e}")
        raise

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of products in {products_file}")

    products: List[Product] = []
    seen_codes = set()

    for index, item in enumerate(data):
        try:
            product = Product.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping invalid product at index {index}: {e.error_count()} error(s)")
            continue

        if product.code in seen_codes:
            logger.warning(f"Skipping duplicate product code: {product.code}")
            continue

        seen_codes.add(product.code)
        products.append(product)

    logger.info(f"Loaded {len(products)} products from {products_file}")
    return products
