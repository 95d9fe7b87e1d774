from typing import Dict, List

# style -> categories that typically complement it
STYLE_CATEGORY_AFFINITY: Dict[str, List[str]] = {
    "modern": ["SOFA", "COFFEE_TABLE", "TV_UNIT", "LIGHTING", "RUG", "MIRROR"],
    "traditional": ["SOFA", "DINING_TABLE", "DINING_CHAIR", "WARDROBE", "DRESSER", "CURTAIN", "RUG"],
    "minimalist": ["SOFA", "BED", "DESK", "BOOKSHELF", "LIGHTING", "STORAGE"],
    "eclectic": ["SOFA", "COFFEE_TABLE", "BOOKSHELF", "RUG", "DECOR", "LIGHTING", "MIRROR"],
    "scandinavian": ["SOFA", "COFFEE_TABLE", "BOOKSHELF", "DESK", "RUG", "LIGHTING"],
    "industrial": ["DESK", "OFFICE_CHAIR", "BOOKSHELF", "COFFEE_TABLE", "LIGHTING", "STORAGE"],
    "bohemian": ["SOFA", "RUG", "CURTAIN", "DECOR", "LIGHTING", "SIDE_TABLE", "MIRROR"],
    "coastal": ["SOFA", "COFFEE_TABLE", "SIDE_TABLE", "RUG", "DECOR", "LIGHTING", "MIRROR"],
    "mid_century": ["SOFA", "COFFEE_TABLE", "SIDE_TABLE", "DESK", "BOOKSHELF", "LIGHTING"],
    "contemporary": ["SOFA", "DINING_TABLE", "DINING_CHAIR", "TV_UNIT", "LIGHTING", "RUG"],
    "rustic": ["DINING_TABLE", "DINING_CHAIR", "BOOKSHELF", "STORAGE", "RUG", "DECOR"],
    "luxury": [
        "SOFA",
        "BED",
        "DINING_TABLE",
        "DINING_CHAIR",
        "WARDROBE",
        "DRESSER",
        "CURTAIN",
        "RUG",
        "LIGHTING",
        "MIRROR",
    ],
}

STYLE_MATERIAL_AFFINITY: Dict[str, List[str]] = {
    "modern": ["metal", "glass", "leather", "chrome", "acrylic"],
    "traditional": ["wood", "mahogany", "oak", "velvet", "silk", "brass"],
    "minimalist": ["wood", "metal", "cotton", "linen", "concrete"],
    "eclectic": ["wood", "metal", "fabric", "rattan", "ceramic"],
    "scandinavian": ["wood", "birch", "pine", "wool", "cotton", "linen"],
    "industrial": ["metal", "iron", "steel", "wood", "concrete", "leather"],
    "bohemian": ["rattan", "jute", "cotton", "macrame", "bamboo", "fabric"],
    "coastal": ["wood", "rattan", "linen", "cotton", "wicker", "bamboo"],
    "mid_century": ["wood", "walnut", "teak", "leather", "fabric", "brass"],
    "contemporary": ["metal", "glass", "leather", "fabric", "wood"],
    "rustic": ["wood", "reclaimed wood", "iron", "stone", "burlap", "leather"],
    "luxury": ["marble", "velvet", "silk", "gold", "brass", "leather", "crystal"],
}

# room type hint -> categories a furnished room of that type is expected to have
ROOM_CATEGORY_MAP: Dict[str, List[str]] = {
    "living_room": ["SOFA", "COFFEE_TABLE", "TV_UNIT", "RUG", "CURTAIN", "LIGHTING", "SIDE_TABLE", "DECOR"],
    "bedroom": ["BED", "WARDROBE", "DRESSER", "SIDE_TABLE", "CURTAIN", "RUG", "LIGHTING", "MIRROR"],
    "dining_room": ["DINING_TABLE", "DINING_CHAIR", "STORAGE", "LIGHTING", "RUG", "DECOR"],
    "office": ["DESK", "OFFICE_CHAIR", "BOOKSHELF", "STORAGE", "LIGHTING"],
    "kitchen": ["STORAGE", "LIGHTING", "DECOR"],
    "outdoor": ["OUTDOOR", "LIGHTING", "DECOR", "RUG"],
}

# classified room types whose hint key differs from the lowercased name
ROOM_TYPE_HINT_ALIASES: Dict[str, str] = {
    "study_office": "office",
    "balcony": "outdoor",
}

ROOM_NAME_KEYWORDS: List[Dict[str, object]] = [
    {"type": "LIVING_ROOM", "keywords": ["living", "lounge", "family room", "sitting"]},
    {"type": "BEDROOM", "keywords": ["master bed", "bedroom", "guest room", "kids room", "nursery"]},
    {"type": "DINING_ROOM", "keywords": ["dining", "eat-in"]},
    {"type": "KITCHEN", "keywords": ["kitchen", "pantry", "kitchenette"]},
    {"type": "BATHROOM", "keywords": ["bath", "shower", "toilet", "powder room", "washroom", "restroom"]},
    {"type": "STUDY_OFFICE", "keywords": ["study", "office", "workspace", "den", "library"]},
    {"type": "BALCONY", "keywords": ["balcony", "terrace", "patio", "veranda", "deck"]},
]
