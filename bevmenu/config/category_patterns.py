# bevmenu/config/category_patterns.py
# Regex -> category label tables used when the server has no name for a
# category id. Order matters: the first match wins, so specific styles sit
# above the general ones ("Double IPA" before "IPA").

import re
from typing import NamedTuple, Pattern, Tuple


class CategoryPattern(NamedTuple):
    pattern: Pattern
    name: str


def _p(regex: str, name: str) -> CategoryPattern:
    return CategoryPattern(re.compile(regex, re.IGNORECASE), name)


WINE_PATTERNS: Tuple[CategoryPattern, ...] = (
    _p(r"\b(cabernet\s+sauvignon|cab\s+sauv)\b", "Cabernet Sauvignon"),
    _p(r"\b(sauvignon\s+blanc|sauv\s+blanc)\b", "Sauvignon Blanc"),
    _p(r"\bpinot\s+noir\b", "Pinot Noir"),
    _p(r"\b(pinot\s+grigio|pinot\s+gris)\b", "Pinot Grigio"),
    _p(r"\b(chardonnay|chard)\b", "Chardonnay"),
    _p(r"\bmerlot\b", "Merlot"),
    _p(r"\briesling\b", "Riesling"),
    _p(r"\bmoscato\b", "Moscato"),
    _p(r"\bprosecco\b", "Prosecco"),
    _p(r"\bchianti\b", "Chianti"),
    _p(r"\b(rosé|rose)\b", "Rosé"),
    _p(r"\bmalbec\b", "Malbec"),
    _p(r"\bzinfandel\b", "Zinfandel"),
    _p(r"\b(shiraz|syrah)\b", "Shiraz"),
    _p(r"\btempranillo\b", "Tempranillo"),
    _p(r"\bsangiovese\b", "Sangiovese"),
    _p(r"\bgewürztraminer\b", "Gewürztraminer"),
    _p(r"\balbariño\b", "Albariño"),
    _p(r"\bviognier\b", "Viognier"),
    _p(r"\bchampagne\b", "Champagne"),
    _p(r"\bcava\b", "Cava"),
    _p(r"\bbrunello\b", "Brunello"),
    _p(r"\bbarolo\b", "Barolo"),
    _p(r"\bburgundy\b", "Burgundy"),
    _p(r"\bbordeaux\b", "Bordeaux"),
)

BEER_PATTERNS: Tuple[CategoryPattern, ...] = (
    _p(r"\b(double\s+ipa|imperial\s+ipa|dipa)\b", "Double IPA"),
    _p(r"\b(hazy\s+ipa|new\s+england\s+ipa|neipa)\b", "Hazy IPA"),
    _p(r"\bsession\s+ipa\b", "Session IPA"),
    _p(r"\bwest\s+coast\s+ipa\b", "West Coast IPA"),
    _p(r"\bipa\b", "IPA"),
    _p(r"\bpale\s+ale\b", "Pale Ale"),
    _p(r"\b(wheat\s+beer|hefeweizen|witbier)\b", "Wheat Beer"),
    _p(r"\b(light\s+beer|lite\s+beer)\b", "Light Beer"),
    _p(r"\bbrown\s+ale\b", "Brown Ale"),
    _p(r"\bamber\s+ale\b", "Amber Ale"),
    _p(r"\bred\s+ale\b", "Red Ale"),
    _p(r"\bstout\b", "Stout"),
    _p(r"\bporter\b", "Porter"),
    _p(r"\blager\b", "Lager"),
    _p(r"\bpilsner\b", "Pilsner"),
    _p(r"\bsaison\b", "Saison"),
    _p(r"\bgose\b", "Gose"),
    _p(r"\bsour\b", "Sour Beer"),
    _p(r"\bcraft\s+beer\b", "Craft Beer"),
)

COCKTAIL_PATTERNS: Tuple[CategoryPattern, ...] = (
    _p(r"\bmartini\b", "Martini"),
    _p(r"\bmargarita\b", "Margarita"),
    _p(r"\bmojito\b", "Mojito"),
    _p(r"\bcosmopolitan\b", "Cosmopolitan"),
    _p(r"\bold\s+fashioned\b", "Old Fashioned"),
    _p(r"\bmanhattan\b", "Manhattan"),
    _p(r"\bnegroni\b", "Negroni"),
    _p(r"\bsangria\b", "Sangria"),
    _p(r"\bmimosa\b", "Mimosa"),
    _p(r"\bbellini\b", "Bellini"),
    _p(r"\bcocktail\b", "Cocktail"),
)

# Keyword gates: a domain's patterns are only tried when one of its gate
# words appears in the name or type hint.
WINE_GATE = re.compile(
    r"\b(wine|cabernet|cab|sauvignon|sauv|pinot|chardonnay|chard|merlot|riesling|"
    r"moscato|prosecco|chianti|rosé|rose|malbec|zinfandel|shiraz|syrah|tempranillo|"
    r"sangiovese|gewürztraminer|albariño|viognier|champagne|cava|brunello|barolo|"
    r"burgundy|bordeaux)\b",
    re.IGNORECASE,
)
BEER_GATE = re.compile(
    r"\b(beer|ale|lager|ipa|stout|porter|pilsner|hefeweizen|witbier|saison|gose)\b",
    re.IGNORECASE,
)
COCKTAIL_GATE = re.compile(r"\b(cocktails?|martinis?|margaritas?)\b", re.IGNORECASE)

PATTERN_DOMAINS = (
    (WINE_GATE, WINE_PATTERNS),
    (BEER_GATE, BEER_PATTERNS),
    (COCKTAIL_GATE, COCKTAIL_PATTERNS),
)
