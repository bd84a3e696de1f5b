"""Curated seed hotels per neighborhood, used by the fetch step.

Keys are neighborhood ids from data/neighborhoods.json. Each record holds
only editorial fields; ids, slugs and neighborhood metadata are added
during normalization (fetchers/seed.py).
"""

SEED_HOTELS: dict[str, list[dict]] = {
    "plaka": [
        {"name": "Electra Palace Athens", "star_rating": 5, "price_per_night": 280, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 5, "amenities": ["Pool", "Spa", "Restaurant", "Gym"], "best_for": ["Luxury", "Couples", "Views"], "overview": "Iconic luxury hotel in the heart of Plaka with stunning rooftop pool and Acropolis views. Neoclassical elegance meets modern comfort.", "pros": ["Rooftop pool with Acropolis view", "Prime Plaka location", "Excellent service"], "cons": ["Premium pricing", "Can be busy"]},
        {"name": "Plaka Hotel", "star_rating": 3, "price_per_night": 95, "has_acropolis_view": True, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "AC"], "best_for": ["Budget", "Location", "Solo travelers"], "overview": "Charming budget-friendly hotel in the heart of Plaka. Simple rooms with great location and friendly staff.", "pros": ["Unbeatable location", "Great value", "Rooftop terrace"], "cons": ["Basic rooms", "No pool"]},
        {"name": "AVA Hotel Athens", "star_rating": 4, "price_per_night": 180, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 4, "amenities": ["Restaurant", "Bar", "WiFi", "Concierge"], "best_for": ["Boutique", "Couples", "Design lovers"], "overview": "Stylish boutique hotel with contemporary design and Acropolis views. Perfect blend of comfort and aesthetics.", "pros": ["Beautiful design", "Great rooftop", "Quiet location"], "cons": ["Small rooms", "Limited amenities"]},
        {"name": "Herodion Hotel", "star_rating": 4, "price_per_night": 165, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 4, "amenities": ["Restaurant", "Bar", "Garden", "WiFi"], "best_for": ["Families", "Couples", "History buffs"], "overview": "Elegant hotel at the foot of the Acropolis with beautiful garden and rooftop restaurant.", "pros": ["Steps from Acropolis", "Lovely garden", "Family-friendly"], "cons": ["Dated decor in some rooms"]},
        {"name": "Central Athens Hotel", "star_rating": 3, "price_per_night": 85, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "AC"], "best_for": ["Budget", "Solo travelers", "Short stays"], "overview": "Clean and comfortable budget option in central Plaka. No frills but excellent value.", "pros": ["Great price", "Central location", "Clean rooms"], "cons": ["Basic amenities", "No views"]},
    ],
    "monastiraki": [
        {"name": "A for Athens", "star_rating": 4, "price_per_night": 150, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 5, "amenities": ["Rooftop Bar", "Restaurant", "WiFi"], "best_for": ["Nightlife", "Young travelers", "Views"], "overview": "Hip hotel right on Monastiraki Square with the best rooftop bar in Athens. Unbeatable Acropolis views.", "pros": ["Famous rooftop bar", "Perfect location", "Trendy vibe"], "cons": ["Can be noisy", "Small rooms"]},
        {"name": "360 Degrees Hotel", "star_rating": 4, "price_per_night": 140, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 4, "amenities": ["Rooftop", "Bar", "WiFi", "Breakfast"], "best_for": ["Views", "Couples", "Photographers"], "overview": "Modern hotel with panoramic rooftop offering 360-degree views of Athens landmarks.", "pros": ["Incredible views", "Modern rooms", "Great breakfast"], "cons": ["Street noise", "Busy area"]},
        {"name": "Attalos Hotel", "star_rating": 3, "price_per_night": 75, "has_acropolis_view": True, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Rooftop Terrace", "Breakfast", "WiFi"], "best_for": ["Budget", "Backpackers", "Location"], "overview": "Classic budget hotel with rooftop terrace views. Simple but clean with unbeatable location.", "pros": ["Budget-friendly", "Rooftop views", "Helpful staff"], "cons": ["Basic rooms", "Old building"]},
        {"name": "O&B Athens Boutique Hotel", "star_rating": 4, "price_per_night": 170, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 4, "amenities": ["Spa", "Restaurant", "Bar", "Gym"], "best_for": ["Boutique", "Couples", "Wellness"], "overview": "Elegant boutique hotel combining neoclassical architecture with modern luxury.", "pros": ["Beautiful building", "Excellent spa", "Quiet rooms"], "cons": ["Pricey restaurant"]},
        {"name": "Athens Backpackers", "star_rating": 2, "price_per_night": 35, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 3, "amenities": ["Rooftop Bar", "Kitchen", "WiFi"], "best_for": ["Backpackers", "Budget", "Social"], "overview": "Legendary backpacker hostel with famous rooftop bar. Social atmosphere and great location.", "pros": ["Super cheap", "Great rooftop", "Social vibe"], "cons": ["Hostel dorms", "Can be loud"]},
    ],
    "syntagma": [
        {"name": "Hotel Grande Bretagne", "star_rating": 5, "price_per_night": 450, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 5, "amenities": ["Pool", "Spa", "Restaurant", "Gym", "Concierge"], "best_for": ["Luxury", "Special occasions", "Business"], "overview": "Athens' most iconic luxury hotel overlooking Syntagma Square. Historic grandeur with world-class service.", "pros": ["Legendary hotel", "Stunning rooftop", "Impeccable service"], "cons": ["Very expensive", "Formal atmosphere"]},
        {"name": "King George Athens", "star_rating": 5, "price_per_night": 380, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 5, "amenities": ["Restaurant", "Spa", "Butler Service", "Gym"], "best_for": ["Luxury", "Couples", "Fine dining"], "overview": "Boutique luxury hotel next to Grande Bretagne with intimate atmosphere and Tudor Hall restaurant.", "pros": ["Intimate luxury", "Amazing restaurant", "Personal service"], "cons": ["Expensive", "Smaller than GB"]},
        {"name": "NJV Athens Plaza", "star_rating": 5, "price_per_night": 220, "has_acropolis_view": True, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Restaurant", "Bar", "Gym", "Business Center"], "best_for": ["Business", "Central location", "Comfort"], "overview": "Modern luxury hotel on Syntagma Square. Excellent for business travelers and those wanting central location.", "pros": ["Prime location", "Modern rooms", "Good value luxury"], "cons": ["Less character", "No rooftop"]},
        {"name": "Electra Hotel Athens", "star_rating": 4, "price_per_night": 140, "has_acropolis_view": False, "has_rooftop_bar": True, "rooftop_rating": 3, "amenities": ["Restaurant", "Bar", "WiFi", "Breakfast"], "best_for": ["Mid-range", "Shopping", "Convenience"], "overview": "Comfortable hotel on Ermou shopping street. Great base for exploring with rooftop restaurant.", "pros": ["Shopping location", "Good breakfast", "Friendly staff"], "cons": ["No Acropolis view", "Busy street"]},
        {"name": "Arethusa Hotel", "star_rating": 3, "price_per_night": 90, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "AC"], "best_for": ["Budget", "Central", "Practical"], "overview": "Simple, clean hotel steps from Syntagma metro. Perfect budget base for sightseeing.", "pros": ["Great location", "Clean rooms", "Affordable"], "cons": ["Basic amenities", "No views"]},
    ],
    "kolonaki": [
        {"name": "St. George Lycabettus", "star_rating": 5, "price_per_night": 250, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 5, "amenities": ["Pool", "Spa", "Restaurant", "Gym"], "best_for": ["Luxury", "Views", "Quiet"], "overview": "Hillside luxury hotel with stunning city views. Rooftop pool and Le Grand Balcon restaurant.", "pros": ["Amazing views", "Rooftop pool", "Quiet area"], "cons": ["Uphill walk", "Away from sites"]},
        {"name": "Periscope Hotel", "star_rating": 4, "price_per_night": 160, "has_acropolis_view": False, "has_rooftop_bar": True, "rooftop_rating": 3, "amenities": ["Rooftop", "Bar", "WiFi", "Breakfast"], "best_for": ["Design", "Boutique", "Hip"], "overview": "Design-forward boutique hotel in fashionable Kolonaki. Modern aesthetic with rooftop terrace.", "pros": ["Great design", "Trendy area", "Good breakfast"], "cons": ["Small rooms", "No major views"]},
        {"name": "Coco-Mat Athens BC", "star_rating": 4, "price_per_night": 180, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Spa", "Restaurant", "Gym", "Organic Bedding"], "best_for": ["Wellness", "Eco-conscious", "Sleep quality"], "overview": "Wellness-focused hotel featuring Coco-Mat's famous organic mattresses and sustainable design.", "pros": ["Best beds in Athens", "Eco-friendly", "Great spa"], "cons": ["No rooftop", "Quiet area"]},
        {"name": "Kolonaki Townhouse", "star_rating": 3, "price_per_night": 120, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "Garden"], "best_for": ["Boutique", "Quiet", "Local feel"], "overview": "Charming small hotel in residential Kolonaki. Feels like staying at a friend's elegant home.", "pros": ["Charming atmosphere", "Quiet street", "Personal service"], "cons": ["Limited amenities", "No views"]},
    ],
    "psyrri": [
        {"name": "Pallas Athena Grecotel", "star_rating": 5, "price_per_night": 200, "has_acropolis_view": False, "has_rooftop_bar": True, "rooftop_rating": 4, "amenities": ["Restaurant", "Bar", "Spa", "Art Gallery"], "best_for": ["Art lovers", "Design", "Nightlife"], "overview": "Art-focused luxury hotel with rotating exhibitions and vibrant design. In the heart of creative Psyrri.", "pros": ["Unique art concept", "Great location", "Excellent restaurant"], "cons": ["No Acropolis view", "Can be noisy"]},
        {"name": "Athens Tiare Hotel", "star_rating": 4, "price_per_night": 130, "has_acropolis_view": False, "has_rooftop_bar": True, "rooftop_rating": 3, "amenities": ["Rooftop", "Bar", "WiFi", "Breakfast"], "best_for": ["Nightlife", "Young travelers", "Value"], "overview": "Modern hotel in the heart of Athens' nightlife district. Great rooftop for evening drinks.", "pros": ["Nightlife location", "Modern rooms", "Good value"], "cons": ["Street noise", "Basic breakfast"]},
        {"name": "InnAthens", "star_rating": 4, "price_per_night": 110, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Restaurant", "Bar", "WiFi", "Breakfast"], "best_for": ["Foodies", "Local experience", "Value"], "overview": "Boutique hotel with excellent restaurant serving modern Greek cuisine. Perfect for food lovers.", "pros": ["Great restaurant", "Authentic area", "Good value"], "cons": ["No rooftop", "Gritty neighborhood"]},
        {"name": "Athens Way Hotel", "star_rating": 3, "price_per_night": 80, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "AC"], "best_for": ["Budget", "Nightlife", "Young travelers"], "overview": "Simple budget hotel in vibrant Psyrri. Clean rooms and great location for exploring.", "pros": ["Budget-friendly", "Great location", "Clean"], "cons": ["Basic rooms", "Noisy area"]},
    ],
    "koukaki": [
        {"name": "Herodion Hotel", "star_rating": 4, "price_per_night": 155, "has_acropolis_view": True, "has_rooftop_bar": True, "rooftop_rating": 4, "amenities": ["Restaurant", "Bar", "Garden", "WiFi"], "best_for": ["Families", "Quiet", "Acropolis access"], "overview": "Elegant hotel at the south slope of the Acropolis. Beautiful garden and easy access to sites.", "pros": ["Quiet location", "Garden setting", "Near Acropolis"], "cons": ["Uphill walk to center"]},
        {"name": "Acropolis Hill Hotel", "star_rating": 3, "price_per_night": 85, "has_acropolis_view": True, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "AC", "Terrace"], "best_for": ["Budget", "Views", "Local area"], "overview": "Great value hotel with Acropolis views in authentic Koukaki neighborhood.", "pros": ["Acropolis views", "Local neighborhood", "Great value"], "cons": ["Basic amenities", "Uphill location"]},
        {"name": "Marble House", "star_rating": 2, "price_per_night": 55, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Kitchen", "WiFi", "Garden"], "best_for": ["Budget", "Long stays", "Self-catering"], "overview": "Family-run pension with garden courtyard. Simple rooms but incredible value and warm hospitality.", "pros": ["Super affordable", "Lovely garden", "Friendly owners"], "cons": ["Very basic", "Shared facilities"]},
        {"name": "Philippos Hotel", "star_rating": 3, "price_per_night": 95, "has_acropolis_view": True, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "AC"], "best_for": ["Mid-range", "Quiet", "Couples"], "overview": "Comfortable hotel in quiet Koukaki with partial Acropolis views. Good base for sightseeing.", "pros": ["Quiet area", "Good breakfast", "Near metro"], "cons": ["Dated decor", "No rooftop"]},
    ],
    "exarchia": [
        {"name": "Exarchion Hotel", "star_rating": 3, "price_per_night": 65, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "AC"], "best_for": ["Budget", "Alternative culture", "Students"], "overview": "Classic hotel in bohemian Exarchia. Simple but clean with authentic neighborhood experience.", "pros": ["Very affordable", "Authentic area", "Near museums"], "cons": ["Gritty neighborhood", "Basic rooms"]},
        {"name": "Orion Hotel", "star_rating": 2, "price_per_night": 50, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["WiFi", "AC"], "best_for": ["Budget", "Backpackers", "Long stays"], "overview": "No-frills budget hotel in Exarchia. Perfect for travelers who want to save money.", "pros": ["Rock-bottom prices", "Central location", "Clean"], "cons": ["Very basic", "Alternative area"]},
        {"name": "City Circus Athens", "star_rating": 3, "price_per_night": 40, "has_acropolis_view": False, "has_rooftop_bar": True, "rooftop_rating": 3, "amenities": ["Rooftop", "Bar", "Kitchen", "Events"], "best_for": ["Backpackers", "Social", "Budget"], "overview": "Award-winning hostel with great rooftop and social events. Mix of dorms and private rooms.", "pros": ["Great atmosphere", "Rooftop bar", "Social events"], "cons": ["Hostel vibe", "Can be loud"]},
    ],
    "piraeus": [
        {"name": "Piraeus Theoxenia Hotel", "star_rating": 4, "price_per_night": 120, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Restaurant", "Bar", "WiFi", "Parking"], "best_for": ["Ferry travelers", "Business", "Marina views"], "overview": "Modern hotel near Piraeus port. Perfect for early ferry departures to the islands.", "pros": ["Near ferries", "Marina views", "Good restaurant"], "cons": ["Far from Athens center", "Industrial area"]},
        {"name": "Phidias Hotel", "star_rating": 3, "price_per_night": 75, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "AC"], "best_for": ["Ferry travelers", "Budget", "Practical"], "overview": "Simple hotel walking distance from Piraeus port. Ideal for catching early ferries.", "pros": ["Very close to port", "Affordable", "Clean"], "cons": ["Basic rooms", "Not scenic"]},
        {"name": "Kastella Hotel", "star_rating": 3, "price_per_night": 85, "has_acropolis_view": False, "has_rooftop_bar": False, "rooftop_rating": 0, "amenities": ["Breakfast", "WiFi", "Sea View"], "best_for": ["Seafood lovers", "Local experience", "Quiet"], "overview": "Charming hotel in Kastella neighborhood with sea views. Near excellent seafood tavernas.", "pros": ["Sea views", "Great restaurants nearby", "Authentic area"], "cons": ["Far from center", "Limited transport"]},
    ],
}
