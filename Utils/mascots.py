# ----------------------------
# Status page mascots
# ----------------------------
NO_MASCOT = "No mascot selected. Set APP_ANIMAL environment variable."

MASCOTS = {
    "monkey": (
        "  __\n"
        " /  \\\n"
        "|  o o |\n"
        " \\_^_/\n"
    ),
    "canary": (
        "   (\n"
        "  ( )\n"
        " /   \\\n"
        "(___ _)\n"
    ),
    "dog": (
        "   __\n"
        " /    \\\n"
        "/ ..|\\ \\\n"
        "(_\\_|_ )\n"
    ),
    "cat": (
        " /\\_/\\\n"
        "( o.o )\n"
        " > ^ <\n"
    ),
    "mouse": (
        " _  _\n"
        "(o)(o)\n"
        " \\../\n"
    ),
    "tiger": (
        " ('__')\n"
        " ( oo )\n"
        " (_)_) \n"
    ),
    "dragon": (
        "        \\\n"
        "       (o>\n"
        "   \\\\  //\\\n"
        "    \\\\V_/_\n"
    ),
}


def resolve_mascot(animal) -> str:
    """Return the ASCII art for `animal` (case-insensitive), or the fallback text."""
    return MASCOTS.get((animal or "").lower(), NO_MASCOT)
