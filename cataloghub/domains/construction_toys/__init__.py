"""Construction toy providers (LEGO sets and compatible brands)."""

from cataloghub.domains.construction_toys.brickset import BRICKSET
from cataloghub.domains.construction_toys.lego import LEGO, filter_valid_products
from cataloghub.domains.construction_toys.playmobil import PLAYMOBIL
from cataloghub.domains.construction_toys.rebrickable import REBRICKABLE

PROVIDERS = (BRICKSET, REBRICKABLE, LEGO, PLAYMOBIL)

__all__ = [
    "BRICKSET",
    "LEGO",
    "PLAYMOBIL",
    "PROVIDERS",
    "REBRICKABLE",
    "filter_valid_products",
]
