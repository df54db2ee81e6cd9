"""Seed data for the catalogue.

The built-in catalogue is six gallons of concentrated paint. A JSON fixture
with the same shape (a list of product objects) can replace it.
"""

from pathlib import Path

from pydantic import TypeAdapter

from catalogue.product.product import Product

_PLACEHOLDER = "https://via.placeholder.com/300x200"

DEFAULT_PRODUCTS = (
    {
        "id": 1,
        "name": "Pintura Roja Concentrada",
        "price": 45000,
        "image": f"{_PLACEHOLDER}/FF0000/FFFFFF?text=Rojo",
        "description": "Galón de pintura roja concentrada de alta calidad",
        "stock": 50,
    },
    {
        "id": 2,
        "name": "Pintura Azul Concentrada",
        "price": 42000,
        "image": f"{_PLACEHOLDER}/0000FF/FFFFFF?text=Azul",
        "description": "Galón de pintura azul concentrada de alta calidad",
        "stock": 30,
    },
    {
        "id": 3,
        "name": "Pintura Verde Concentrada",
        "price": 44000,
        "image": f"{_PLACEHOLDER}/00FF00/000000?text=Verde",
        "description": "Galón de pintura verde concentrada de alta calidad",
        "stock": 25,
    },
    {
        "id": 4,
        "name": "Pintura Amarilla Concentrada",
        "price": 43000,
        "image": f"{_PLACEHOLDER}/FFFF00/000000?text=Amarillo",
        "description": "Galón de pintura amarilla concentrada de alta calidad",
        "stock": 40,
    },
    {
        "id": 5,
        "name": "Pintura Negra Concentrada",
        "price": 41000,
        "image": f"{_PLACEHOLDER}/000000/FFFFFF?text=Negro",
        "description": "Galón de pintura negra concentrada de alta calidad",
        "stock": 35,
    },
    {
        "id": 6,
        "name": "Pintura Blanca Concentrada",
        "price": 40000,
        "image": f"{_PLACEHOLDER}/FFFFFF/000000?text=Blanco",
        "description": "Galón de pintura blanca concentrada de alta calidad",
        "stock": 60,
    },
)

_product_list = TypeAdapter(list[Product])


def seed_products() -> list[Product]:
    """Fresh Product instances for the built-in catalogue."""
    return _product_list.validate_python(list(DEFAULT_PRODUCTS))


def load_products(path: Path | str) -> list[Product]:
    """Read a JSON fixture file into Product instances."""
    return _product_list.validate_json(Path(path).read_bytes())
