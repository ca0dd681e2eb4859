# bevmenu/config/menu_types.py
# Flat menu types and their categories, used by the keyword categorizer.
# Category keywords are checked in declaration order; the first type with a
# matching category wins.

from bevmenu.config.keywords import BLUSH_WINE_KEYWORDS, RED_WINE_KEYWORDS, WHITE_WINE_KEYWORDS

MENU_TYPES = {
    "wine": {
        "label": "Wine",
        "sort_by": "name",
        "categories": {
            "red": {"label": "Red", "keywords": list(RED_WINE_KEYWORDS)},
            "white": {"label": "White", "keywords": list(WHITE_WINE_KEYWORDS)},
            "blush": {"label": "Blush", "keywords": list(BLUSH_WINE_KEYWORDS)},
            "other": {"label": "Other", "keywords": []},
        },
    },
    "beer": {
        "label": "Beer",
        "sort_by": "name",
        "categories": {
            "draught": {
                "label": "Draught",
                "keywords": ["draught", "draft", "tap", "glass", "pint", "snifter", "oz glass"],
            },
            "bottles": {"label": "Bottles", "keywords": ["bottle", "can"]},
            "other": {"label": "Other", "keywords": []},
        },
    },
    "cocktails": {
        "label": "Cocktails",
        "sort_by": "name",
        "categories": {
            "classic": {"label": "Classic", "keywords": ["martini", "manhattan", "old fashioned", "negroni"]},
            "contemporary": {"label": "Contemporary", "keywords": ["cosmopolitan", "mojito", "margarita"]},
        },
    },
    "other": {
        "label": "Other Beverages",
        "sort_by": "name",
        "categories": {
            "hardSeltzer": {"label": "Hard Seltzer", "keywords": ["seltzer", "white claw", "truly"]},
            "cider": {"label": "Cider", "keywords": ["cider", "angry orchard"]},
            "misc": {"label": "Miscellaneous", "keywords": []},
        },
    },
}

DISPLAY_ORDER = ["wine", "beer", "cocktails", "other"]
