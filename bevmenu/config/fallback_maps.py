# bevmenu/config/fallback_maps.py
# Id -> name tables for lookups the spreadsheet API does not expose.
# Server-provided names always take precedence over these.

# Format: "record id": "Display name"
FALLBACK_FORMAT_MAP = {
    "recDlaYGEmS23x6gB": "Glass",
    "rec0aUp7LnsIyyjoi": "Bottle",
    "reckfsdGMlPPVFr4B": "Draught",
    "recv5Y45UNDzSYkRN": "Cocktail Glass",
    "recbYoh1uvlrXXnI5": "Martini Glass",
    "recJOuYK67z0S23Gg": "Wine Bottle",
    "reccRRXPCCn3zVjwY": "Can",
}

FALLBACK_SIZE_MAP = {
    "rec2ILZWjw55W3tAZ": "6 oz",
    "recYifjWPwrg16nSU": "9 oz",
    "rece3G1UbwD51gzB6": "12 oz",
    "rec1bKYdnFr2uRnpB": "16 oz",
    "recoct47whZXNVi7g": "6 oz Snifter",
    "recZpEhpUYdzhEoNO": "25.4 oz",
    "rec24sY3kGxxGpRAL": "12 oz Bottle",
    "recYUplgpKJIBUhJq": "6.3 oz Mini",
    "rec5GO73jLOI8Jv6m": "12 oz Can",
}

# Legacy beverage type ids -> flat menu type, used by the categorizer
LEGACY_TYPE_MAPPINGS = {
    "recOW2zHJoiGChTT7": "beer",
    "recpQiuWolgTk6pMA": "wine",
    "recyM0G5uQKbEZmzL": "wine",
    "recd7YaoOUK9j9vMN": "wine",
    "rec0vSnmMvKBvvmca": "cocktails",
    "rec4bdv7UX0fkFAAv": "other",
}
