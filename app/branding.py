import re

# Tailwind gradient classes, one per seller
_COLOR_SCHEMES: list[str] = [
    "from-amber-500 to-orange-600",
    "from-emerald-500 to-teal-600",
    "from-blue-500 to-cyan-600",
    "from-purple-500 to-indigo-600",
    "from-pink-500 to-rose-600",
    "from-green-500 to-emerald-600",
    "from-yellow-500 to-amber-600",
    "from-red-500 to-pink-600",
    "from-indigo-500 to-purple-600",
    "from-cyan-500 to-blue-600",
    "from-orange-500 to-red-600",
    "from-teal-500 to-green-600",
    "from-violet-500 to-purple-600",
    "from-rose-500 to-pink-600",
    "from-sky-500 to-blue-600",
]

_NON_DIGITS = re.compile(r"\D")


def get_brand_color(seller_id: str) -> str:
    """Deterministic colour scheme for a seller, keyed on the digits of its id."""
    digits = _NON_DIGITS.sub("", seller_id)
    if not digits:
        return _COLOR_SCHEMES[0]
    return _COLOR_SCHEMES[int(digits) % len(_COLOR_SCHEMES)]
