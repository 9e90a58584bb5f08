"""
Terror tables per group. Each group numbers its killers from 0, the group
in play is decided by the round type, not by the id.
"""
from typing import Dict, Optional, Tuple

TerrorEntry = Tuple[str, Optional[str]]

TERRORS: Dict[int, TerrorEntry] = {
    0: ("Huggy", "40, 114, 255"),
    1: ("Corrupted Toys", "180, 89, 89"),
    2: ("Demented Spongebob", "192, 166, 8"),
    3: ("Specimen 8", "144, 121, 57"),
    4: ("HER", "156, 156, 156"),
    5: ("Tails Doll", "238, 107, 0"),
    6: ("Black Sun", "207, 207, 207"),
    7: ("Aku Ball", "241, 0, 0"),
    8: ("Ao Oni", "99, 38, 229"),
    9: ("Toren's Shadow", "43, 43, 43"),
    10: ("[CENSORED]", "200, 0, 0"),
    11: ("WhiteNight", "255, 69, 69"),
    12: ("An Arbiter", "255, 206, 40"),
    13: ("Specimen 5", "125, 56, 48"),
    14: ("Comedy", "156, 156, 156"),
    15: ("Purple Guy", "212, 100, 255"),
    16: ("Spongefly Swarm", "255, 220, 0"),
    17: ("Hush", "44, 86, 154"),
    18: ("Mope Mope", "110, 209, 113"),
    19: ("Sawrunner", "183, 129, 84"),
    20: ("Imposter", "209, 5, 3"),
    21: ("Something", "183, 183, 183"),
    22: ("Starved", "233, 0, 0"),
    23: ("The Painter", "247, 255, 121"),
    24: ("The Guidance", "0, 236, 10"),
    25: ("With Many Voices", "180, 0, 30"),
    26: ("Nextbots", "127, 231, 225"),
    27: ("Harvest", "142, 109, 128"),
    28: ("Smileghost", "255, 245, 4"),
    29: ("Karol_Corpse", "230, 174, 238"),
    30: ("MX", "245, 64, 100"),
    31: ("Big Bird", "255, 190, 0"),
    32: ("Dev Bytes", "184, 174, 255"),
    33: ("Luigi & Luigi Dolls", "11, 217, 0"),
    34: ("V2", "16, 205, 255"),
    35: ("Withered Bonnie", "119, 32, 183"),
    36: ("The Boys", "255, 128, 0"),
    37: ("Something Wicked", "36, 36, 36"),
    38: ("Seek", "217, 217, 217"),
    39: ("Rush", "160, 193, 219"),
    40: ("Sonic", "36, 48, 219"),
    41: ("Bad Batter", "125, 125, 125"),
    42: ("Signus", "221, 64, 209"),
    43: ("Mirror", "214, 176, 116"),
    44: ("Legs", "202, 202, 202"),
    45: ("Mona & The Mountain", "135, 135, 135"),
    46: ("Judgement Bird", "204, 202, 196"),
    47: ("Slender", "168, 168, 168"),
    48: ("Maul-A-Child", "231, 215, 151"),
    49: ("Garten Goers", "221, 30, 39"),
    50: ("Don't Touch Me", "255, 181, 0"),
    51: ("Specimen 2", "0, 125, 77"),
    52: ("Specimen 10", "255, 220, 172"),
    53: ("The Lifebringer", "145, 255, 45"),
    54: ("Pale Association", "198, 254, 255"),
    55: ("Toy Enforcer", "57, 89, 236"),
    56: ("TBH", "255, 140, 114"),
    57: ("DoomBox", "30, 129, 255"),
    58: ("Christian Brutal Sniper", "185, 36, 43"),
    59: ("Nosk", "255, 124, 0"),
    60: ("Apocrean Harvester", "192, 64, 255"),
    61: ("Arkus", "255, 64, 188"),
    62: ("Cartoon Cat", "192, 192, 192"),
    63: ("Wario Apparition", "255, 190, 42"),
    64: ("Shinto", "147, 104, 24"),
    65: ("Hell Bell", "157, 99, 173"),
    66: ("Security", "81, 32, 255"),
    67: ("The Swarm", "0, 255, 34"),
    68: ("Shiteyanyo", "0, 255, 252"),
    69: ("Bacteria", "108, 99, 87"),
    70: ("Tiffany", "192, 72, 152"),
    71: ("HoovyDundy", "135, 0, 26"),
    72: ("Haket", "217, 62, 65"),
    73: ("Akumii-kari", "58, 27, 28"),
    74: ("Lunatic Cultist", "245, 232, 75"),
    75: ("Sturm", "185, 92, 25"),
    76: ("Punishing Bird", "180, 223, 243"),
    77: ("Prisoner", "253, 82, 197"),
    78: ("Red Bus", "238, 55, 68"),
    79: ("Waterwraith", "161, 186, 212"),
    80: ("Astrum Aureus", "255, 98, 76"),
    81: ("Snarbolax", "231, 29, 0"),
    82: ("All-Around-Helpers", "255, 24, 0"),
    83: ("lain", "100, 255, 225"),
    84: ("Sakuya Izayoi", "191, 205, 217"),
    85: ("Arrival", "255, 32, 0"),
    86: ("Miros Birds", "255, 208, 0"),
    87: ("BFF", "255, 126, 234"),
    88: ("Scavenger", "212, 169, 67"),
    89: ("Tinky Winky", "160, 67, 212"),
    90: ("Tricky", "212, 67, 79"),
    91: ("Yolm", "123, 143, 164"),
    92: ("Red Fanatic", "245, 0, 30"),
    93: ("Dr. Tox", "99, 207, 38"),
    94: ("Ink Demon", "147, 132, 98"),
    95: ("Retep", "108, 104, 92"),
    96: ("Those Olden Days", "84, 58, 60"),
    97: ("S.O.S", "204, 65, 69"),
    98: ("Bigger Boot", "64, 142, 50"),
    99: ("The Pursuer", "209, 80, 42"),
    100: ("Spamton", "224, 204, 73"),
    101: ("Immortal Snail", "214, 80, 130"),
    102: ("Charlotte", "200, 61, 78"),
    103: ("Herobrine", "238, 238, 238"),
    104: ("Peepy", "120, 120, 120"),
    105: ("The Jester", "112, 95, 176"),
    106: ("Wild Yet Curious Creature", "85, 221, 82"),
    107: ("Manti", "78, 169, 221"),
    108: ("Horseless Headless Horsemann", "255, 138, 0"),
    109: ("Ghost Girl", "255, 158, 158"),
    110: ("Cubor's Revenge", "226, 77, 0"),
    111: ("Poly", "88, 103, 204"),
    112: ("Dog Mimic", "168, 147, 96"),
    113: ("Warden", "48, 207, 171"),
    114: ("FOX Squad", "107, 253, 255"),
    115: ("Express Train To Hell", "188, 96, 3"),
    116: ("Deleted", "48, 48, 48"),
    117: ("Killer Fish", "48, 101, 207"),
    118: ("Terror of Nowhere", "236, 110, 228"),
    119: ("Beyond", "47, 225, 255"),
    120: ("The Origin", "168, 161, 160"),
    121: ("Time Ripper", "180, 143, 115"),
    122: ("This Killer Does Not Exist", "255, 226, 119"),
    123: ("Parhelion's Victims", "180, 62, 72"),
    124: ("Bed Mecha", "89, 89, 89"),
    125: ("Killer Rabbit", "233, 233, 233"),
    126: ("Bravera", "61, 214, 255"),
    127: ("MissingNo", "214, 214, 214"),
    128: ("Living Shadow", "125, 57, 144"),
    129: ("The Plague Doctor", "147, 95, 95"),
    130: ("The Rat", "229, 186, 154"),
    131: ("Waldo", "229, 70, 72"),
    132: ("Clockey", "47, 44, 226"),
    133: ("Malicious Twins", "125, 125, 125"),
}

ALTERNATES: Dict[int, TerrorEntry] = {
    0: ("Decayed Sponge", "64, 84, 70"),
    1: ("WHITEFACE", "255, 255, 255"),
    2: ("Sanic", "37, 122, 255"),
    3: ("Parhelion", "255, 173, 59"),
    4: ("Distorted Yan", "158, 250, 255"),
    5: ("Chomper", "163, 77, 192"),
    6: ("The Knight Of Toren", "107, 229, 255"),
    7: ("Tragedy", "207, 207, 207"),
    8: ("Apathy", "94, 64, 50"),
    9: ("MR MEGA", "161, 0, 255"),
    10: ("sm64.z64", "77, 77, 77"),
    11: ("Convict Squad", "0, 255, 148"),
    12: ("Paradise Bird", "255, 10, 0"),
    13: ("Angry Munci", "60, 60, 60"),
    14: ("Lord's Signal", "203, 218, 255"),
    15: ("Feddys", "137, 97, 43"),
    16: ("TBH SPY", "255, 92, 85"),
    17: ("The Observation", "255, 205, 73"),
    18: (" ", "164, 157, 140"),
    19: ("Judas", "255, 0, 7"),
    20: ("Glaggle Gang", "255, 252, 107"),
    21: ("Try Not To Touch Me", "255, 203, 0"),
    22: ("Ambush", "15, 243, 164"),
    23: ("Teuthida", "9, 0, 209"),
    24: ("Eggman's Announcement", "221, 110, 74"),
    25: ("S.T.G.M", "140, 140, 140"),
    26: ("Army In Black", "243, 170, 255"),
    27: ("Lone Agent", "195, 150, 194"),
    28: ("Roblander", "214, 214, 214"),
    29: ("Fusion Pilot", "255, 167, 81"),
    30: ("Joy", "255, 238, 40"),
    31: ("The Red Mist", "253, 26, 0"),
    32: ("Sakuya the Ripper", "152, 4, 0"),
    33: ("Walpurgisnacht", "160, 137, 190"),
    34: ("Dev Maulers", "126, 243, 255"),
    35: ("Restless Creator", "255, 56, 49"),
}

# 0: Mystic Moon, 1: Blood Moon, 2: Twilight, 3: Solstice
MOONS: Dict[int, TerrorEntry] = {
    0: ("PSYCHOSIS", "96, 184, 255"),
    1: ("VIRUS", "202, 0, 0"),
    2: ("APOCALYPSE BIRD", "255, 222, 61"),
    3: ("PANDORA", "0, 212, 137"),
}

SPECIALS: Dict[int, TerrorEntry] = {
    0: ("The Meatball Man", "193, 94, 61"),
}

EVENTS: Dict[int, TerrorEntry] = {
    0: ("Rift Monsters", "163, 123, 228"),
    1: ("GIGABYTE", "245, 19, 19"),
}

UNBOUND: Dict[int, TerrorEntry] = {
    0: ("Guidance & The Booboo's", "30, 255, 0"),
    1: ("Red VS Blue", "128, 109, 168"),
    2: ("Third Trumpet", "255, 0, 16"),
    3: ("Forest Guardians", "255, 205, 0"),
    4: ("Higher Beings", "255, 141, 163"),
    5: ("Quadruple Sponge", "156, 152, 72"),
    6: ("Your Best Friends", "229, 46, 161"),
    7: ("Hotel Monsters", "168, 88, 48"),
    8: ("Squibb Squad", "93, 255, 180"),
    9: ("Garden Rejects", "141, 131, 166"),
    10: ("Judgement Day", "255, 106, 100"),
    11: ("Me and My Shadow", "255, 255, 255"),
    12: ("Meltdown", "255, 84, 0"),
    13: ("Faceless Mafia", "221, 221, 221"),
    14: ("Mansion Monsters", "255, 142, 71"),
    15: ("Copyright Infringement", "255, 71, 71"),
    16: ("Purple Bros", "182, 126, 255"),
    17: ("Scavengers", "255, 222, 105"),
    18: ("Life & Death", "255, 222, 105"),
    19: ("Labyrinth", "136, 123, 176"),
    20: ("Spiteful Shadows", "70, 70, 70"),
    21: ("Triple Munci", "51, 51, 51"),
    22: ("Daycare", "238, 196, 255"),
    23: ("Huggy Horde", "94, 112, 219"),
    24: ("Infection", "156, 44, 44"),
    25: ("Triple Hush", "104, 129, 202"),
    26: ("[CENSORED]", "255, 0, 16"),
    27: ("Byte Horde", "255, 131, 210"),
    28: ("SawMarathon", "185, 132, 92"),
    29: ("TAKE THE NAMI CHALLENGE", "255, 0, 2"),
    30: ("Thunderstorm", "141, 255, 253"),
    31: ("END OF THE WORLD", "255, 205, 0"),
    32: ("Fragmented Memories", "124, 164, 255"),
    33: ("Mona & Mona & Mona & Mona", "135, 106, 97"),
    34: ("Seekers", "135, 106, 97"),
    35: ("Nugget Squad", "255, 164, 88"),
    36: ("Saul's Goodmen", "255, 221, 129"),
    37: ("Something Old, Something New", "166, 148, 255"),
    38: ("POV: Bug", "28, 96, 45"),
    39: ("Punishing Birdemic", "219, 207, 205"),
    40: ("Double Ao Oni", "135, 55, 180"),
    41: ("Too Many Voices", "118, 23, 27"),
    42: ("Memory Crypts", "253, 221, 32"),
    43: ("Zumbo Sauce", "81, 255, 107"),
    44: ("Freaks", "190, 49, 49"),
    45: ("Lunatic Cult", "255, 213, 81"),
    46: ("Transportation Trio & The Drifter", "106, 255, 73"),
    47: ("Father Son Bonding", "145, 49, 190"),
    48: ("WHAT IS MY NAME", "115, 115, 115"),
    49: ("Glaggleland Cremators", "255, 226, 117"),
    50: ("Triple Signus", "188, 117, 255"),
    51: ("Triple Akumii Kari", "82, 82, 82"),
    52: ("Black & White", "82, 82, 82"),
    53: ("[LESSER CENSORED]", "255, 0, 0"),
    54: ("Blue Monsters", "0, 119, 255"),
    55: ("Drones", "255, 0, 10"),
    56: ("Scrapyard Takers", "173, 0, 7"),
    57: ("Luigi Dolls", "149, 255, 119"),
    58: ("Meteor Shower", "168, 76, 0"),
    59: ("Triple TBH", "142, 142, 142"),
    60: ("Lost Souls", "197, 197, 197"),
    61: ("Ballin", "255, 17, 0"),
    62: ("Reunion", "197, 160, 126"),
    63: ("Angels", "255, 0, 7"),
    64: ("Ordinary Apocalypse Bird", "255, 182, 0"),
    65: ("Pack of Wild Yet Curious Creatures", "197, 0, 4"),
    66: ("ToN X SlashCo Collab", "0, 255, 97"),
    67: ("Pack of Yolm", "144, 144, 144"),
    68: ("Threepy", "144, 144, 144"),
    69: ("  ???  ", "185, 162, 185"),
    70: ("Delete Me", "72, 72, 72"),
    71: ("Spamton Spam", "255, 229, 57"),
    72: ("Death From Above", "255, 40, 119"),
    73: ("It Came From Bus To Nowhere", "40, 152, 255"),
    74: ("Zombie Apocalypse", "53, 185, 74"),
    75: ("Eating Contest", "106, 106, 106"),
    76: ("Triple Clockeys", "0, 51, 255"),
    77: ("Triple Killer Fish", "92, 161, 224"),
    78: ("Lethal League", "172, 129, 255"),
    79: ("Trollage", "130, 130, 130"),
    80: ("Mopemopemopemopemopemope", "76, 255, 91"),
    81: ("Triple Trouble", "76, 149, 255"),
    82: ("Triple Living Shadow", "61, 11, 113"),
    83: ("Beyond's Masks", "76, 255, 255"),
}

ROUND_TYPE_TO_ENGLISH: Dict[str, str] = {
    "クラシック": "Classic",
    "Classic": "Classic",
    "霧": "Fog",
    "Fog": "Fog",
    "パニッシュ": "Punished",
    "Punished": "Punished",
    "サボタージュ": "Sabotage",
    "Sabotage": "Sabotage",
    "Among Us": "Sabotage",
    "アモングアス": "Sabotage",
    "狂気": "Cracked",
    "Cracked": "Cracked",
    "ブラッドバス": "Bloodbath",
    "Bloodbath": "Bloodbath",
    "ダブル・トラブル": "Double_Trouble",
    "Double Trouble": "Double_Trouble",
    "Double_Trouble": "Double_Trouble",
    "ゴースト": "Ghost",
    "Ghost": "Ghost",
    "ミッドナイト": "Midnight",
    "Midnight": "Midnight",
    "オルタネイト": "Alternate",
    "Alternate": "Alternate",
    "ミスティックムーン": "Mystic_Moon",
    "Mystic Moon": "Mystic_Moon",
    "Mystic_Moon": "Mystic_Moon",
    "ブラッドムーン": "Blood_Moon",
    "Blood Moon": "Blood_Moon",
    "Blood_Moon": "Blood_Moon",
    "トワイライト": "Twilight",
    "Twilight": "Twilight",
    "ソルスティス": "Solstice",
    "Solstice": "Solstice",
    "走れ！": "RUN",
    "RUN": "RUN",
    "8ページ": "Eight_Pages",
    "8 Pages": "Eight_Pages",
    "Eight_Pages": "Eight_Pages",
    "コールドナイト": "Cold_Night",
    "Cold Night": "Cold_Night",
    "Cold_Night": "Cold_Night",
    "GIGABYTE": "GIGABYTE",
    "アンバウンド": "Unbound",
    "Unbound": "Unbound",
    "カスタム": "Custom",
    "Custom": "Custom",
}
