"""Fixed site constants: price tiers, page limits, guide definitions, deploy files.

Kept apart from the builders so copy and thresholds are easy to tune.
"""

from models.enums import PageKind, PriceTier

CURRENCY = "EUR"

# Lower bound (inclusive) of each tier; luxury is open-ended
TIER_THRESHOLDS: list[tuple[int, PriceTier]] = [
    (250, PriceTier.LUXURY),
    (150, PriceTier.UPSCALE),
    (80, PriceTier.MID),
    (0, PriceTier.BUDGET),
]

TIER_RANGE_LABELS: dict[PriceTier, str] = {
    PriceTier.BUDGET: "Under €80",
    PriceTier.MID: "€80-150",
    PriceTier.UPSCALE: "€150-250",
    PriceTier.LUXURY: "€250+",
}

# Selection limits (first N in data-store order)
HOME_HIGHLIGHT_LIMIT = 6
HOME_ROOFTOP_MIN_RATING = 4
NEARBY_NEIGHBORHOOD_LIMIT = 4
SIMILAR_HOTEL_LIMIT = 3

# Hotel page price range multipliers
PRICE_RANGE_LOW = 0.8
PRICE_RANGE_HIGH = 1.5

# Defaults for optional hotel fields
DEFAULT_PROS = ["Great location", "Good value"]
DEFAULT_CONS = ["Book early"]
DEFAULT_BEST_FOR = ["Travelers"]
DEFAULT_METRO_DISTANCE = "5-10 min"

BOOKING_SEARCH_URL = "https://www.booking.com/searchresults.html?ss="
FORMSPREE_URL = "https://formspree.io/f/"

# Output paths relative to the output root
NEIGHBORHOOD_DIR = "athens-hotels"
HOTEL_DIR = "hotel"
OUTPUT_SUBDIRS = [NEIGHBORHOOD_DIR, HOTEL_DIR, "css", "images"]

# Sitemap priority by page class
SITEMAP_PRIORITIES: dict[PageKind, str] = {
    PageKind.HOME: "1.0",
    PageKind.NEIGHBORHOOD: "0.9",
    PageKind.GUIDE: "0.8",
    PageKind.HOTEL: "0.7",
    PageKind.CONTACT: "0.5",
}

# Guide pages: slug -> copy. Filters and sort orders live in builder/guides.py
GUIDES = {
    "budget-hotels-athens": {
        "heading": "Budget Hotels in Athens",
        "subheading": "Great stays under €80/night",
        "intro": (
            "Athens offers excellent budget accommodation without sacrificing "
            "location or comfort. These hotels prove you don't need to spend a "
            "fortune to enjoy the Greek capital."
        ),
        "title": "Budget Hotels in Athens",
        "description": (
            "Find affordable Athens hotels under €80/night. Great locations, "
            "clean rooms, excellent value."
        ),
    },
    "luxury-hotels-athens": {
        "heading": "Luxury Hotels in Athens",
        "subheading": "The finest 5-star experiences",
        "intro": (
            "Experience Athens in style at these exceptional luxury hotels. "
            "World-class service, stunning views, and unforgettable experiences await."
        ),
        "title": "Luxury Hotels in Athens",
        "description": (
            "Discover Athens' finest 5-star hotels. Rooftop pools, Acropolis "
            "views, world-class service."
        ),
    },
    "best-rooftop-bars-athens": {
        "heading": "Best Rooftop Bar Hotels in Athens",
        "subheading": "Sunset cocktails with Acropolis views",
        "intro": (
            "Nothing beats watching the sunset over the Acropolis with a cocktail "
            "in hand. These hotels offer the best rooftop experiences in Athens."
        ),
        "title": "Best Rooftop Bar Hotels in Athens",
        "description": (
            "Hotels with the best rooftop bars in Athens. Acropolis views, sunset "
            "cocktails, unforgettable evenings."
        ),
    },
}

# Deployment files (Netlify/Cloudflare Pages format)
ROBOTS_TEMPLATE = """User-agent: *
Allow: /

Sitemap: {site_url}/sitemap.xml"""

HEADERS_FILE = """/*
  X-Frame-Options: DENY
  X-Content-Type-Options: nosniff
  Referrer-Policy: strict-origin-when-cross-origin

/images/*
  Cache-Control: public, max-age=31536000

/css/*
  Cache-Control: public, max-age=31536000"""

REDIRECTS_FILE = """/index.html  /  301
/area/*  /athens-hotels/:splat  301"""
