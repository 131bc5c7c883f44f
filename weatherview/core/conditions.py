"""Condition text -> icon key, background gradient, and accent colour.

Matching is case-insensitive substring search over ordered rule tables;
the first rule with a matching keyword wins. Keywords cover both the
English condition groups and the Croatian descriptions returned for
``lang=hr``.
"""

DEFAULT_ICON = "weather-cloudy-alert"

# (keywords, icon) -- order matters: "thunderstorm with light rain" is a storm
ICON_RULES: list[tuple[tuple[str, ...], str]] = [
    (("thunder", "storm", "grmljavin", "oluj"), "weather-lightning-rainy"),
    (("drizzle", "rosulj"), "weather-partly-rainy"),
    (("snow", "sleet", "snijeg", "susnježic"), "weather-snowy"),
    (("rain", "shower", "kiš", "pljus"), "weather-rainy"),
    (("mist", "fog", "haze", "smoke", "dust", "sand", "magl", "izmaglic"), "weather-fog"),
    (("few clouds", "scattered", "partly", "malo oblaka", "raštrkan", "djelomično"), "weather-partly-cloudy"),
    (("cloud", "overcast", "oblač", "oblak", "oblac"), "weather-cloudy"),
    (("clear", "sun", "vedro", "sunčano"), "weather-sunny"),
]

NEUTRAL_GRADIENT = ("#F7F9FC", "#E6EDF3")
NEUTRAL_GRADIENT_DARK = ("#0B0F14", "#121A24")

# (keywords, light gradient, dark gradient)
GRADIENT_RULES: list[tuple[tuple[str, ...], tuple[str, str], tuple[str, str]]] = [
    (("thunder", "storm"), ("#D7D2F5", "#B8B0E8"), ("#1A1530", "#2A2148")),
    (("rain", "drizzle"), ("#DDEBF7", "#B9D4EE"), ("#0D1B2A", "#1B2F45")),
    (("snow", "sleet"), ("#F4F8FC", "#DCE7F2"), ("#141B24", "#22303F")),
    (("mist", "fog", "haze", "smoke", "dust"), ("#ECEFF3", "#D5DBE2"), ("#15191E", "#252C34")),
    (("cloud",), ("#EEF2F7", "#D6E0EC"), ("#111821", "#1E2935")),
    (("clear", "sun"), ("#FFF7D6", "#FFECB3"), ("#1B1608", "#2E2510")),
]

ACCENT_RULES: list[tuple[tuple[str, ...], str]] = [
    (("thunder", "storm", "grmljavin"), "#B18CFF"),
    (("rain", "drizzle", "kiš", "rosulj"), "#5EE1FF"),
    (("snow", "sleet", "snijeg"), "#CFE3FF"),
    (("mist", "fog", "haze", "magl"), "#B8C4CF"),
    (("cloud", "oblač", "oblak", "oblac"), "#8AB4F8"),
    (("clear", "sun", "vedro"), "#FFD469"),
]


def _match(text: str | None, rules):
    if not isinstance(text, str) or not text:
        return None
    needle = text.lower()
    for rule in rules:
        if any(keyword in needle for keyword in rule[0]):
            return rule
    return None


def icon_for(description: str | None) -> str:
    rule = _match(description, ICON_RULES)
    return rule[1] if rule else DEFAULT_ICON


def gradient_for(condition_main: str | None, is_dark: bool) -> tuple[str, str]:
    rule = _match(condition_main, GRADIENT_RULES)
    if rule is None:
        return NEUTRAL_GRADIENT_DARK if is_dark else NEUTRAL_GRADIENT
    return rule[2] if is_dark else rule[1]


def accent_for(condition: str | None) -> str | None:
    """Accent colour for a condition, or None when it is not recognised."""
    rule = _match(condition, ACCENT_RULES)
    return rule[1] if rule else None
