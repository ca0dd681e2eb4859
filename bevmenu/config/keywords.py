# bevmenu/config/keywords.py
# Keyword lists used to infer beverage type, serving format and wine color
# from a beverage name when the resolved fields are missing.
#
# Matching is case-insensitive and on whole words / phrases.

RED_WINE_KEYWORDS = (
    "cabernet", "merlot", "pinot noir", "shiraz", "syrah", "zinfandel",
    "sangiovese", "chianti", "bordeaux", "burgundy", "barolo", "brunello",
    "tempranillo", "rioja", "malbec", "petite sirah", "red blend",
)

WHITE_WINE_KEYWORDS = (
    "chardonnay", "sauvignon blanc", "pinot grigio", "pinot gris", "riesling",
    "moscato", "gewürztraminer", "albariño", "vermentino", "viognier",
    "sémillon", "chenin blanc", "white blend", "prosecco", "champagne",
)

BLUSH_WINE_KEYWORDS = (
    "rosé", "rose", "blush", "pink", "white zinfandel", "provence",
)

WINE_KEYWORDS = ("wine",) + RED_WINE_KEYWORDS + WHITE_WINE_KEYWORDS + BLUSH_WINE_KEYWORDS

BEER_KEYWORDS = (
    "beer", "ale", "lager", "ipa", "stout", "porter", "pilsner", "wheat",
    "hefeweizen", "witbier", "saison", "gose",
)

CIDER_RTD_KEYWORDS = (
    "cider", "rtd", "seltzer", "hard seltzer", "angry orchard", "original sin",
    "white claw", "truly", "twisted tea",
)

COCKTAIL_KEYWORDS = (
    "cocktail", "martini", "margarita", "mojito", "cosmopolitan", "collins",
    "sangria", "old fashioned", "manhattan", "negroni",
)

# Serving formats
DRAUGHT_KEYWORDS = ("draught", "draft", "on tap", "tap")
BOTTLE_KEYWORDS = ("bottle", "btl", "can")
POUR_KEYWORDS = ("pint", "snifter")
GLASS_KEYWORDS = ("glass",)

# Type names produced by inference; these match the lookup table names
TYPE_RED_WINE = "Red Wine"
TYPE_WHITE_WINE = "White Wine"
TYPE_BLUSH = "Blush"
TYPE_WINE = "Wine"
TYPE_BEER = "Beer"
TYPE_CIDER_RTD = "Cider & RTD"
TYPE_COCKTAILS = "Cocktails"

FORMAT_DRAUGHT = "Draught"
FORMAT_BOTTLE = "Bottle"
FORMAT_GLASS = "Glass"

# Types served from the tap when poured into a glass
TAP_TYPES = (TYPE_BEER, TYPE_CIDER_RTD)
