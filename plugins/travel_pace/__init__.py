"""Travel pace calculator plugin."""

manifest = {
    "title": "Travel Pace",
    "summary": "Convert between distance and travel time at fast, normal or slow pace, optionally riding a mount or vehicle.",
    "blueprint": "travel_pace",
    "category": "Tabletop Tools",
}


__all__ = ["manifest"]
