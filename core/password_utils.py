# core/password_utils.py
from __future__ import annotations
import re
import secrets
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from core.config import MAX_LENGTH, MIN_LENGTH
from core.errors import (
    EmptySelection,
    InvalidLength,
    LengthTooShortForRequirements,
    RandomSourceUnavailable,
)
from core.log_utils import get_logger

log = get_logger(__name__)

# Characters that are easily confused with each other
AMBIGUOUS_CHARS = frozenset("il1Lo0O")

# Retries after the first draw before falling back to explicit construction
MAX_ATTEMPTS = 100


class CharacterClass(Enum):
    LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
    UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    DIGIT = "0123456789"
    SYMBOL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

    @property
    def chars(self) -> str:
        return self.value

    @property
    def pattern(self) -> re.Pattern:
        return _PATTERNS[self]

    def matches(self, text: str) -> bool:
        """True when text contains at least one character of this class."""
        return self.pattern.search(text) is not None


_PATTERNS = {cls: re.compile("[" + re.escape(cls.value) + "]") for cls in CharacterClass}

# Canonical order used to build the alphabet
CLASS_ORDER: Tuple[CharacterClass, ...] = (
    CharacterClass.LOWERCASE,
    CharacterClass.UPPERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)


@dataclass(frozen=True)
class GenerationRequest:
    length: int
    classes: Tuple[CharacterClass, ...]
    exclude_ambiguous: bool = True

    def __post_init__(self):
        object.__setattr__(self, "classes", _ordered(self.classes))


def _ordered(classes: Iterable[CharacterClass]) -> Tuple[CharacterClass, ...]:
    wanted = set(classes)
    return tuple(c for c in CLASS_ORDER if c in wanted)


# --------- Alphabet ---------
def selected_classes(
    use_lower: bool = True,
    use_upper: bool = True,
    use_digits: bool = True,
    use_symbols: bool = False,
) -> Tuple[CharacterClass, ...]:
    """Map the on/off toggles of a UI to character classes, in canonical order."""
    flags = (use_lower, use_upper, use_digits, use_symbols)
    return tuple(cls for cls, on in zip(CLASS_ORDER, flags) if on)


def build_alphabet(classes: Iterable[CharacterClass], exclude_ambiguous: bool = False) -> str:
    """
    Concatenate the alphabets of the selected classes, optionally dropping ambiguous characters.
    Duplicates are kept as they are.
    """
    ordered = _ordered(classes)
    if not ordered:
        raise EmptySelection()
    alphabet = "".join(cls.chars for cls in ordered)
    if exclude_ambiguous:
        alphabet = "".join(c for c in alphabet if c not in AMBIGUOUS_CHARS)
    if not alphabet:
        raise EmptySelection("No characters left after removing ambiguous ones.")
    return alphabet


# --------- Secure random source ---------
def _random_uint32() -> int:
    try:
        return secrets.randbits(32)
    except NotImplementedError as e:  # os.urandom has no backend
        raise RandomSourceUnavailable() from e


def _random_below(n: int) -> int:
    # 32-bit draw reduced modulo n: index k is picked with probability <= 1/n + 1/2**32
    return _random_uint32() % n


def generate_random(alphabet: Sequence[str], length: int) -> str:
    """
    Draw `length` characters uniformly (up to modulo bias) from `alphabet` using the OS CSPRNG.
    """
    if not alphabet:
        raise ValueError("Alphabet must not be empty.")
    if length < 0:
        raise ValueError("Length must not be negative.")
    size = len(alphabet)
    return "".join(alphabet[_random_below(size)] for _ in range(length))


def secure_shuffle(items: List[str]) -> List[str]:
    """Fisher-Yates shuffle in place, last index down to 1, j drawn from [0, i]."""
    for i in range(len(items) - 1, 0, -1):
        j = _random_below(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


# --------- Constraint enforcement ---------
def _satisfies(password: str, classes: Sequence[CharacterClass]) -> bool:
    return all(cls.matches(password) for cls in classes)


def _usable_requirements(alphabet: str, classes: Iterable[CharacterClass]) -> List[Tuple[CharacterClass, str]]:
    """Pair each required class with its characters present in the alphabet; drop classes with none."""
    pools = []
    for cls in _ordered(classes):
        pool = "".join(c for c in cls.chars if c in alphabet)
        if pool:
            pools.append((cls, pool))
        else:
            log.warning("Character set %s has no characters left in the alphabet; not required.", cls.name.lower())
    return pools


def _force_requirements(alphabet: str, length: int, pools: Sequence[Tuple[CharacterClass, str]]) -> str:
    if length < len(pools):
        raise LengthTooShortForRequirements(length, len(pools))
    chars = list(generate_random(alphabet, length - len(pools)))
    chars.extend(pool[_random_below(len(pool))] for _, pool in pools)
    return "".join(secure_shuffle(chars))


def enforce(alphabet: str, length: int, required_classes: Iterable[CharacterClass]) -> str:
    """
    Return a password of `length` characters over `alphabet` containing at least one character
    of every required class.

    One direct draw is tried first, then up to MAX_ATTEMPTS more draws. If none of them covers
    every class, the password is built explicitly: random filler plus one character per class,
    shuffled together.
    """
    pools = _usable_requirements(alphabet, required_classes)
    classes = [cls for cls, _ in pools]

    password = generate_random(alphabet, length)
    if _satisfies(password, classes):
        return password

    for attempt in range(1, MAX_ATTEMPTS + 1):
        password = generate_random(alphabet, length)
        if _satisfies(password, classes):
            log.debug("Requirements met on retry %d (length=%d).", attempt, length)
            return password

    log.info("No draw met the requirements after %d retries; building password explicitly.", MAX_ATTEMPTS)
    return _force_requirements(alphabet, length, pools)


# --------- Public API ---------
def generate_password(
    request: GenerationRequest,
    *,
    min_length: int = MIN_LENGTH,
    max_length: int = MAX_LENGTH,
) -> str:
    if not request.classes:
        raise EmptySelection()
    if not min_length <= request.length <= max_length:
        raise InvalidLength(request.length, min_length, max_length)

    alphabet = build_alphabet(request.classes, request.exclude_ambiguous)
    password = enforce(alphabet, request.length, request.classes)
    log.debug(
        "Generated password: length=%d classes=%s exclude_ambiguous=%s alphabet=%d",
        request.length,
        ",".join(cls.name.lower() for cls in request.classes),
        request.exclude_ambiguous,
        len(alphabet),
    )
    return password


def generate_batch(
    request: GenerationRequest,
    count: int,
    *,
    min_length: int = MIN_LENGTH,
    max_length: int = MAX_LENGTH,
) -> List[str]:
    """Generate `count` independent passwords for the same request."""
    if count < 1:
        raise ValueError("Quantity must be at least 1.")
    return [generate_password(request, min_length=min_length, max_length=max_length) for _ in range(count)]
