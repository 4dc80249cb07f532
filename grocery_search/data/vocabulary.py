"""Regional grocery vocabulary.

Each entry maps a canonical (generic) term to the regional or foreign terms
that mean the same product, with the region codes where each term is used.
The first listed region is the term's primary region.
"""

from typing import Dict, List

VocabularyGroup = Dict[str, List[str]]

REGIONAL_VOCABULARY: Dict[str, VocabularyGroup] = {
    "aguacate": {
        "palta": ["AR", "CL", "PE", "UY"],
        "avocado": ["US", "GB"],
    },
    "batata": {
        "boniato": ["ES"],
        "camote": ["MX", "PE"],
        "ñame": ["CO", "VE"],
        "papa dulce": ["CL", "EC"],
        "sweet potato": ["US", "GB"],
    },
    "papas fritas": {
        "patatas fritas": ["ES"],
        "papitas": ["AR", "CL", "UY"],
        "chips": ["US", "GB"],
        "potato chips": ["US", "GB"],
    },
    "brócoli": {
        "brécol": ["ES"],
        "broccoli": ["US", "GB"],
    },
    "col rizada": {
        "col crespa": ["AR", "CL"],
        "berza": ["ES"],
        "acelga silvestre": ["EC", "PE"],
        "kale": ["US", "GB"],
    },
    "semillas de chía": {
        "chía": ["MX", "GT", "SV"],
        "chia seeds": ["US", "GB"],
    },
    "yogur griego": {
        "yogurt griego": ["MX", "VE"],
        "yoghurt griego": ["AR", "UY"],
        "greek yogurt": ["US", "GB"],
    },
    "quinoa": {
        "quinua": ["PE", "BO", "EC"],
        "kinoa": ["CL"],
    },
    "arándanos": {
        "arándanos azules": ["ES"],
        "mirtilo": ["AR", "UY"],
        "blueberries": ["US", "GB"],
        "blueberry": ["US", "GB"],
    },
    "zanahoria": {
        "carlota": ["VE"],
        "daucus": ["ES"],
        "carrot": ["US", "GB"],
    },
    "plátano": {
        "banana": ["AR", "UY", "PY"],
        "banano": ["CO", "VE", "EC", "PE"],
        "cambur": ["VE"],
        "guineo": ["DO", "PR", "CU"],
    },
    "manzana": {
        "poma": ["CL"],
        "maçã": ["BR"],
        "apple": ["US", "GB"],
    },
    "espinaca": {
        "espinafre": ["BR"],
        "spinach": ["US", "GB"],
    },
    "coliflor": {
        "couve-flor": ["BR"],
        "cauliflower": ["US", "GB"],
    },
    "coles de bruselas": {
        "repollitas de bruselas": ["AR", "CL"],
        "couve de bruxelas": ["BR"],
        "brussels sprouts": ["US", "GB"],
    },
    "pera": {
        "pear": ["US", "GB"],
    },
    "naranja": {
        "china": ["PR", "DO"],
        "laranja": ["BR"],
        "orange": ["US", "GB"],
    },
    "salmón": {
        "salmão": ["BR"],
    },
    "almendras": {
        "amêndoas": ["BR"],
        "almonds": ["US", "GB"],
    },
    "palomitas de maíz": {
        "palomitas": ["MX", "ES"],
        "pochoclo": ["AR", "UY"],
        "canguil": ["EC", "PE"],
        "cotufas": ["VE"],
        "crispetas": ["CO"],
        "pororó": ["BR"],
        "rositas de maíz": ["GT", "SV", "HN"],
        "popcorn": ["US", "GB"],
    },
}

COUNTRY_NAMES: Dict[str, str] = {
    "AR": "Argentina",
    "BO": "Bolivia",
    "BR": "Brasil",
    "CL": "Chile",
    "CO": "Colombia",
    "CU": "Cuba",
    "DO": "República Dominicana",
    "EC": "Ecuador",
    "ES": "España",
    "GB": "Reino Unido",
    "GT": "Guatemala",
    "HN": "Honduras",
    "MX": "México",
    "PE": "Perú",
    "PR": "Puerto Rico",
    "PY": "Paraguay",
    "SV": "El Salvador",
    "US": "Estados Unidos",
    "UY": "Uruguay",
    "VE": "Venezuela",
}
