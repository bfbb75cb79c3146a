"""Static definition of the default outfit catalog."""

from typing import Dict, List

DEFAULT_CATALOG: Dict[str, List[dict]] = {
    "tops": [
        {
            "id": "top-tshirt",
            "name": "Cotton T-Shirt",
            "description": "Soft crewneck tee with a clean, minimal fit.",
            "tags": ["casual", "street", "weekend"],
            "image_path": "/top-tshirt.jpg",
            "price_usd": 25,
        },
        {
            "id": "top-shirt",
            "name": "Oxford Shirt",
            "description": "Crisp button-down with a structured collar.",
            "tags": ["business", "smart-casual", "date"],
            "image_path": "/top-shirt.jpg",
            "price_usd": 59,
        },
        {
            "id": "top-pullover",
            "name": "Merino Pullover",
            "description": "Lightweight knit with refined texture.",
            "tags": ["smart-casual", "winter", "work"],
            "image_path": "/top-pullover.png",
            "price_usd": 89,
        },
        {
            "id": "top-blazer",
            "name": "Tailored Blazer",
            "description": "Sharp silhouette with a polished finish.",
            "tags": ["gala", "formal", "cocktail", "business"],
            "image_path": "/top-blazer.jpg",
            "price_usd": 189,
        },
        {
            "id": "top-silk-blouse",
            "name": "Silk Blouse",
            "description": "Draped silk with a subtle sheen.",
            "tags": ["gala", "formal", "cocktail", "date"],
            "image_path": "/top-silk-blouse.jpg",
            "price_usd": 129,
        },
    ],
    "bottoms": [
        {
            "id": "bottom-jeans",
            "name": "Dark Jeans",
            "description": "Slim dark-wash denim with clean lines.",
            "tags": ["casual", "street", "weekend"],
            "image_path": "/bottom-jeans.jpg",
            "price_usd": 69,
        },
        {
            "id": "bottom-chinos",
            "name": "Tapered Chinos",
            "description": "Cotton twill with a modern tapered leg.",
            "tags": ["smart-casual", "work", "date"],
            "image_path": "/bottom-chinos.jpg",
            "price_usd": 65,
        },
        {
            "id": "bottom-pleated-trousers",
            "name": "Pleated Trousers",
            "description": "High-waist trousers with soft drape.",
            "tags": ["formal", "gala", "business"],
            "image_path": "/bottom-pleated-trousers.jpg",
            "price_usd": 110,
        },
        {
            "id": "bottom-pencil-skirt",
            "name": "Pencil Skirt",
            "description": "Structured skirt with a clean hem.",
            "tags": ["business", "cocktail", "date"],
            "image_path": "/bottom-pencil-skirt.jpg",
            "price_usd": 79,
        },
        {
            "id": "bottom-floor-skirt",
            "name": "Floor-Length Skirt",
            "description": "Elegant full-length skirt with movement.",
            "tags": ["gala", "formal"],
            "image_path": "/bottom-floor-skirt.jpg",
            "price_usd": 149,
        },
    ],
    "shoes": [
        {
            "id": "shoes-sneakers",
            "name": "Minimal Sneakers",
            "description": "Clean leather sneakers for everyday wear.",
            "tags": ["casual", "street", "weekend"],
            "image_path": "/shoes-sneakers.jpg",
            "price_usd": 95,
        },
        {
            "id": "shoes-loafers",
            "name": "Leather Loafers",
            "description": "Classic loafers with a sleek profile.",
            "tags": ["smart-casual", "work", "date"],
            "image_path": "/shoes-loafers.jpg",
            "price_usd": 140,
        },
        {
            "id": "shoes-oxfords",
            "name": "Polished Oxfords",
            "description": "Formal lace-ups with a glossy finish.",
            "tags": ["formal", "gala", "business"],
            "image_path": "/shoes-oxfords.jpg",
            "price_usd": 175,
        },
        {
            "id": "shoes-heels",
            "name": "Classic Heels",
            "description": "Pointed-toe heels for evening looks.",
            "tags": ["cocktail", "gala", "formal"],
            "image_path": "/shoes-heels.jpg",
            "price_usd": 130,
        },
        {
            "id": "shoes-ankle-boots",
            "name": "Ankle Boots",
            "description": "Sleek boots with a modest heel.",
            "tags": ["smart-casual", "winter", "date"],
            "image_path": "/shoes-ankle-boots.jpg",
            "price_usd": 155,
        },
    ],
}

__all__ = ["DEFAULT_CATALOG"]
