"""
Curated name pools for aliens and cities.

Both pools are consumed in order, never shuffled, so the same count always
yields the same names. City names contain no whitespace and no ``=``
because the map text format reserves both.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Aliens (75 names)
# ---------------------------------------------------------------------------
ALIEN_NAMES: list[str] = [
    "Zorgon", "Xenthar", "Quilox", "Vrexa", "Morbulon", "Glorzak", "Thraxis",
    "Yzzar", "Kromlech", "Ulgoth", "Nebbix", "Sporax", "Oomvar", "Drezzik",
    "Plaxor", "Wumbuu", "Jexxel", "Frimbo", "Skreel", "Lorvath", "Brakkus",
    "Zynthia", "Ghorm", "Vexil", "Tarquox", "Ixibor", "Hruun", "Quazzat",
    "Mekrit", "Ostrelda", "Xarnak", "Pelloth", "Zibzub", "Krennix", "Umbra",
    "Gliphon", "Vorash", "Taxxon", "Nimrak", "Eloxa", "Drubbel", "Syzzra",
    "Ombrix", "Kwarl", "Fezzik", "Yonnath", "Rakshor", "Blixxa", "Quorvin",
    "Zathra", "Mulgrim", "Vesskar", "Trillox", "Grevna", "Hexapod", "Lurzog",
    "Onyxia", "Pykkor", "Squarn", "Xoloth", "Wyrmak", "Kezzerin", "Dagglo",
    "Fraxxus", "Ulmara", "Zeebo", "Norrgath", "Jubblix", "Vantor", "Croxa",
    "Ithrak", "Gorblax", "Shazzan", "Tevrok", "Moxxor",
]

# Above this many aliens, positional names are used instead of the pool.
ALIEN_POOL_LIMIT = 75
# Positional names are "Alien 1", "Alien 2", ... rather than "Agent <n>".
POSITIONAL_ALIEN_NAME = "Alien {}"

# ---------------------------------------------------------------------------
# Cities
# ---------------------------------------------------------------------------
CITY_NAMES: list[str] = [
    "Talihina", "Pinson", "Fabens", "Clifton", "Bastrop", "Ozona", "Kemmerer",
    "Tonopah", "Winnemucca", "Lusk", "Chadron", "Alpine", "Marfa", "Truckee",
    "Bisbee", "Tombstone", "Ajo", "Kingman", "Needles", "Barstow", "Lone_Pine",
    "Bishop", "Ely", "Elko", "Wendover", "Moab", "Kanab", "Escalante",
    "Panguitch", "Beaver", "Delta", "Fillmore", "Nephi", "Price", "Vernal",
    "Rangely", "Meeker", "Craig", "Steamboat", "Walden", "Laramie", "Rawlins",
    "Lander", "Dubois", "Cody", "Powell", "Lovell", "Sheridan", "Buffalo",
    "Gillette", "Sundance", "Spearfish", "Deadwood", "Lead", "Custer",
    "Hot_Springs", "Valentine", "Ainsworth", "Broken_Bow", "Ogallala",
    "McCook", "Goodland", "Colby", "Oakley", "Hays", "Russell", "Lyons",
    "Pratt", "Medicine_Lodge", "Alva", "Woodward", "Guymon", "Dalhart",
    "Dumas", "Pampa", "Shamrock", "Childress", "Quanah", "Vernon", "Seymour",
    "Graham", "Jacksboro", "Decatur", "Bowie", "Nocona", "Gainesville",
    "Denison", "Paris", "Clarksville", "Hugo", "Idabel", "Broken_Bow_OK",
    "Antlers", "Atoka", "Coalgate", "Ada", "Sulphur", "Ardmore", "Marietta",
    "Waurika", "Duncan", "Lawton", "Altus", "Mangum", "Hobart", "Anadarko",
    "Chickasha", "Tuttle", "Mustang", "Yukon", "Kingfisher", "Enid",
    "Medford", "Ponca_City", "Pawhuska", "Bartlesville", "Nowata", "Vinita",
    "Miami", "Grove", "Jay", "Tahlequah", "Stilwell", "Sallisaw", "Poteau",
    "Heavener", "Mena", "Waldron", "Booneville", "Paris_AR", "Ozark",
]
