"""Loose semantic version value object.

Documentation archives are published under version names that are only
roughly semantic: ``1.20``, ``1.20.4``, ``1.20-SNAPSHOT``, ``1.21pre1``.
``SemVer.parse`` accepts all of them without ever raising:

- missing minor/patch components default to 0
- a pre-release tag may follow with or without a ``-`` (``1.2pre1``)
- build metadata after ``+`` is ignored for ordering
- text that does not start with a number parses as ``0.0.0`` with the
  raw text kept as the tag

Ordering follows semantic versioning: the numeric triple first, then a
release outranks any pre-release of the same triple, then pre-release tags
compare identifier by identifier. Tags containing empty identifiers
(``"a..b"``) cannot be compared meaningfully and compare as equal to any
other tag.

Usage:
    from docshelf.domain.value_objects import SemVer, compare_versions

    SemVer.parse("1.2.5").is_greater_than(SemVer.parse("1.2-SNAPSHOT"))  # True
    compare_versions("1.2", "1.2.0")  # 0
"""

import re
from dataclasses import dataclass, field

_LOOSE_PATTERN = re.compile(
    r"""
    ^\s*[vV=]?\s*
    (?P<major>\d+)
    (?:\.(?P<minor>\d+))?
    (?:\.(?P<patch>\d+))?
    (?:[-.]?(?P<tag>[0-9A-Za-z.\-]*?))?
    (?:\+(?P<build>[0-9A-Za-z.\-]*))?
    \s*$
    """,
    re.VERBOSE | re.ASCII,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class SemVer:
    """Parsed version (value object).

    Attributes:
        major: Major component (0 when missing).
        minor: Minor component (0 when missing).
        patch: Patch component (0 when missing).
        prerelease: Pre-release tag such as ``SNAPSHOT`` or ``pre.1``, or None.
        raw: The original text, excluded from equality.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str | None = None
    raw: str = field(default="", compare=False)

    @classmethod
    def parse(cls, text: str) -> "SemVer":
        """Parse a version string in loose mode.

        Args:
            text: Version string, e.g. ``"1.2"``, ``"1.2.5"``, ``"1.2-SNAPSHOT"``.

        Returns:
            SemVer: Parsed version. Never raises.
        """
        match = _LOOSE_PATTERN.match(text)
        if match is None:
            return cls(prerelease=text.strip() or None, raw=text)
        try:
            return cls(
                major=int(match["major"]),
                minor=int(match["minor"] or 0),
                patch=int(match["patch"] or 0),
                prerelease=match["tag"] or None,
                raw=text,
            )
        except ValueError:
            # Components past the interpreter's int conversion limit.
            return cls(prerelease=text.strip() or None, raw=text)

    def compare_to(self, other: "SemVer") -> int:
        """Compare with another version.

        Returns:
            int: -1, 0 or 1 as this version is lower, equal or higher.
        """
        mine = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if mine != theirs:
            return -1 if mine < theirs else 1
        return _compare_prerelease(self.prerelease, other.prerelease)

    def is_greater_than(self, other: "SemVer") -> bool:
        """Strictly greater under semantic ordering."""
        return self.compare_to(other) > 0

    def same_minor(self, other: "SemVer") -> bool:
        """Minor components are equal (major is not considered)."""
        return self.minor == other.minor

    def same_minor_line(self, other: "SemVer") -> bool:
        """(major, minor) tuples are equal."""
        return (self.major, self.minor) == (other.major, other.minor)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text = f"{text}-{self.prerelease}"
        return text


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings in loose mode.

    Args:
        a: First version string.
        b: Second version string.

    Returns:
        int: -1, 0 or 1 as ``a`` is lower, equal or higher than ``b``.
    """
    return SemVer.parse(a).compare_to(SemVer.parse(b))


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _numeric_key(identifier: str) -> tuple[int, str]:
    # Numeric order for digit strings of any length.
    digits = identifier.lstrip("0")
    return len(digits), digits


def _compare_prerelease(a: str | None, b: str | None) -> int:
    if a == b:
        return 0
    # A release outranks any pre-release of the same triple.
    if a is None:
        return 1
    if b is None:
        return -1

    left = a.split(".")
    right = b.split(".")
    if "" in left or "" in right:
        return 0

    for x, y in zip(left, right):
        if x == y:
            continue
        x_numeric, y_numeric = _is_numeric(x), _is_numeric(y)
        if x_numeric and y_numeric:
            x_key, y_key = _numeric_key(x), _numeric_key(y)
            if x_key != y_key:
                return -1 if x_key < y_key else 1
            continue
        # Numeric identifiers have lower precedence than alphanumeric ones.
        if x_numeric:
            return -1
        if y_numeric:
            return 1
        return -1 if x < y else 1

    if len(left) == len(right):
        return 0
    return -1 if len(left) < len(right) else 1
