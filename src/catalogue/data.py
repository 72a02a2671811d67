"""Bundled store catalogue, used when ``CATALOGUE_FILE`` is not set."""

STORES = [
    {
        "name": "Downtown",
        "products": [
            {"name": "Bread", "unit": "loaf", "price": 2.5},
            {"name": "Eggs", "unit": "dozen", "price": 3.2},
            {"name": "Butter", "unit": "pack", "price": 4.0},
            {"name": "Coffee", "unit": "bag", "price": 8.75},
            {"name": "Tomatoes", "unit": "kg", "price": 3.4},
        ],
    },
    {
        "name": "Riverside",
        "products": [
            {"name": "Milk", "unit": "liter", "price": 1.1},
            {"name": "Apples", "unit": "kg", "price": 2.9},
            {"name": "Cheese", "unit": "block", "price": 6.5},
            {"name": "Bread", "unit": "loaf", "price": 2.7},
        ],
    },
    {
        "name": "Harbor",
        "products": [
            {"name": "Salmon", "unit": "fillet", "price": 7.8},
            {"name": "Lemons", "unit": "bag", "price": 2.2},
            {"name": "Rice", "unit": "kg", "price": 1.9},
        ],
    },
]
