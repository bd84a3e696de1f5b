from enum import Enum


class PriceTier(str, Enum):
    BUDGET = "budget"
    MID = "mid"
    UPSCALE = "upscale"
    LUXURY = "luxury"


class PageKind(str, Enum):
    HOME = "home"
    NEIGHBORHOOD = "neighborhood"
    HOTEL = "hotel"
    GUIDE = "guide"
    CONTACT = "contact"
