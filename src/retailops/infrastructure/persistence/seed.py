"""Sample catalog loaded at startup so a fresh server has something to sell."""

from __future__ import annotations

from retailops.domain.model.product import Product
from retailops.domain.repository.product_repository import ProductRepository

SAMPLE_PRODUCTS = [
    ("Laptop", "High-performance laptop for professionals", 1299.99, 50, "Electronics"),
    ("Wireless Mouse", "Ergonomic wireless mouse", 29.99, 200, "Electronics"),
    ("Office Chair", "Comfortable ergonomic office chair", 249.99, 75, "Furniture"),
    ("Desk Lamp", "LED desk lamp with adjustable brightness", 39.99, 150, "Furniture"),
    ("Coffee Maker", "Programmable coffee maker", 79.99, 100, "Appliances"),
]


def seed_sample_products(product_repo: ProductRepository) -> list[Product]:
    products = [
        Product.create(
            name=name,
            description=description,
            price=price,
            stock=stock,
            category=category,
        )
        for name, description, price, stock, category in SAMPLE_PRODUCTS
    ]
    for product in products:
        product_repo.save(product)
    return products
