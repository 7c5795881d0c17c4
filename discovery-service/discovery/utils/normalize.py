import unicodedata

def remove_accents(input_str: str) -> str:
    s = unicodedata.normalize("NFD", input_str)
    return "".join(c for c in s if unicodedata.category(c) != "Mn")

def normalize_search_term(term: str) -> str:
    """
    Normalizes a free-text search term for substring matching.
    - Lowercases.
    - Trims surrounding whitespace.
    Inner whitespace is kept as typed: "react  hooks" must not match "react hooks".
    """
    if not term:
        return ""
    return term.lower().strip()

# Letters with no canonical decomposition, folded to their base letters
_FOLD = str.maketrans({
    "ø": "o", "ł": "l", "đ": "d", "ð": "d", "ħ": "h", "ı": "i",
    "æ": "ae", "œ": "oe", "þ": "th",
})

def _primary_weight(ch: str) -> tuple:
    # Punctuation and spaces, then digits, then letters
    if ch.isalpha():
        return (2, ch)
    if ch.isdigit():
        return (1, ch)
    return (0, ch)

def collation_key(text: str) -> tuple:
    """
    Locale-style sort key for display strings.

    Primary level ignores accents and case ("Éclair" sorts with "eclair",
    "Øst" with "ost"), and orders punctuation before digits before letters.
    Then accents break ties, then lowercase sorts before uppercase.
    """
    text = unicodedata.normalize("NFC", text or "")
    folded = text.casefold()
    base = remove_accents(folded).translate(_FOLD)
    return (tuple(_primary_weight(ch) for ch in base), folded, text.swapcase())
