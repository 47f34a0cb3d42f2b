"""Fixed game values: slot names, element bit flags, weight bonus and messages."""

# Per-item / partial-sum weight slack used while descending the search tree.
# The terminal check always uses the unit's true carry weight.
MAX_WEIGHT_BONUS = 57

# Display name of the synthetic "nothing equipped" item
EMPTY_ITEM_NAME = "besser nix"

# Raw item feed type column -> slot key
ITEM_TYPE_TO_SLOT: dict[str, str] = {
    "Waffe":    "weapon",
    "Ruestung": "armor",
    "Schild":   "shield",
    "Helm":     "helmet",
    "Ring":     "accessory",
}

# Element bit flags in the raw feed (low nibble = base, high bits = "strong" variant)
ELEMENT_BITS: dict[str, tuple[int, int]] = {
    "fire":  (1, 256),
    "ice":   (2, 512),
    "air":   (4, 1024),
    "earth": (8, 2048),
}

# Fixed user-facing messages for the two domain failure kinds
ELEMENT_MISMATCH_MESSAGE = "Die gewählte Elementkombination ist ungültig."
INVALID_COMBINATION_MESSAGE = (
    "Es konnte keine passende Ausrüstungs-Kombination gefunden werden. "
    "Versuchen Sie andere Einstellungen oder entfernen Sie Gegenstände aus der Ignorierliste."
)

# Source labels reported by the data source fallback chain
SOURCE_HTTP  = "HTTP Endpoint"
SOURCE_FILE  = "Local File (Fallback)"
SOURCE_EMPTY = "Empty (Fallback)"
