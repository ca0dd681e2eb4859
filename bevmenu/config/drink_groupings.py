# bevmenu/config/drink_groupings.py
# Section and group layout of the drink menu.
#
# Location filtering:
# - include: location numbers where the group SHOULD appear (takes priority)
# - exclude: location numbers where the group should NOT appear
# - neither: the group appears at every location

from bevmenu.inference import serving_style_subcategory, varietal_subcategory
from bevmenu.models.common import CustomItem
from bevmenu.models.rules import GroupDefinition, SectionDefinition

ON_TAP = SectionDefinition(
    section_id="on-tap",
    title="ON TAP",
    subtitle="40+ Beers on Tap",
    order=1,
    icon="🍺",
    groups=(
        GroupDefinition(
            group_id="sampler",
            title="Sampler",
            order=1,
            is_custom=True,
            custom_items=(
                CustomItem(title="You Pick", cost=9, text="Choose any 4 draft beers", size="5.5oz pours"),
                CustomItem(title="Manager's Choice", cost=8, text="4 draft beers chosen for you", size="5.5oz pours"),
            ),
        ),
        GroupDefinition(
            group_id="cider",
            title="Cider",
            order=2,
            icon="🍎",
            beverage_types=("Cider & RTD",),
            beverage_formats=("Draught",),
        ),
        GroupDefinition(
            group_id="ales-lagers-stouts",
            title="Ales, Lagers & Pilsners",
            order=3,
            include=(3,),
            beverage_categories=(
                "Lager", "Hazy IPA", "Boston Lager", "Mexican Lager", "Irish Red Ale",
                "Cream Ale", "Golden Ale", "Pale Ale", "Euro Pale Lager",
                "Traditional Lager", "Pale Lager", "Pilsner",
            ),
            beverage_formats=("Draught",),
            subcategory=varietal_subcategory,
        ),
        GroupDefinition(
            group_id="browns-stouts",
            title="Browns & Stouts",
            order=4,
            include=(3,),
            beverage_categories=("English Mild Ale", "Brown Ale", "Stout"),
            beverage_formats=("Draught",),
            subcategory=varietal_subcategory,
        ),
        GroupDefinition(
            group_id="wheat-wit-weiss",
            title="Wheat, Wit & Weiss",
            order=5,
            include=(3,),
            beverage_categories=(
                "Belgian Wheat Ale", "Hefeweizen", "Mango Wheat Ale", "Weissbier",
                "Witbier", "Wheat Ale", "Hefe Weissbier",
            ),
            beverage_formats=("Draught",),
            subcategory=varietal_subcategory,
        ),
        GroupDefinition(
            group_id="ambers-reds",
            title="Ambers & Reds",
            order=6,
            include=(3,),
            beverage_categories=("Amber Ale", "Irish Red Ale"),
            beverage_formats=("Draught",),
            subcategory=varietal_subcategory,
        ),
        GroupDefinition(
            group_id="ipas",
            title="IPAs",
            order=7,
            include=(3,),
            beverage_categories=(
                "American IPA", "Double IPA", "Hazy IPA", "Imperial IPA", "New England IPA",
            ),
            beverage_formats=("Draught",),
            subcategory=varietal_subcategory,
        ),
        GroupDefinition(
            group_id="draught-beer",
            title="Draught Beer",
            order=7,
            exclude=(3,),
            beverage_types=("Beer",),
            beverage_formats=("Draught",),
            subcategory=varietal_subcategory,
        ),
    ),
)

BOTTLED = SectionDefinition(
    section_id="bottled",
    title="BOTTLED",
    subtitle="Classic Favorites",
    order=2,
    icon="🍾",
    groups=(
        GroupDefinition(
            group_id="bottled-beer",
            order=1,
            beverage_types=("Beer", "Cider & RTD"),
            beverage_formats=("Bottle", "Can"),
            subcategory=serving_style_subcategory,
        ),
    ),
)

WINE = SectionDefinition(
    section_id="wine",
    title="WINE",
    subtitle="6oz Glass / 9oz Glass / Bottle",
    order=3,
    icon="🍷",
    groups=(
        GroupDefinition(
            group_id="red-wines",
            title="Red Wines",
            order=1,
            beverage_types=("Red Wine",),
            subcategory=varietal_subcategory,
        ),
        GroupDefinition(
            group_id="white-wines",
            title="White Wines",
            order=2,
            beverage_types=("White Wine",),
            subcategory=varietal_subcategory,
        ),
        GroupDefinition(
            group_id="blush-wines",
            title="Blush & Rosé",
            order=3,
            beverage_types=("Blush",),
            subcategory=varietal_subcategory,
        ),
    ),
)

COCKTAILS = SectionDefinition(
    section_id="cocktails",
    title="COCKTAILS",
    subtitle="Shaken, stirred and unforgettable",
    order=4,
    icon="🍸",
    groups=(
        GroupDefinition(
            group_id="cocktails",
            title="Signature Cocktails",
            order=1,
            beverage_categories=("Signature Cocktails",),
            beverage_types=("Cocktails",),
        ),
        GroupDefinition(
            group_id="martinis",
            title="Martinis",
            order=2,
            beverage_categories=("Martinis",),
            beverage_types=("Cocktails",),
        ),
    ),
)

DRINK_GROUPINGS = (ON_TAP, BOTTLED, WINE, COCKTAILS)
