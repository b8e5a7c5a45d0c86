"""Java language version models."""

import re
from enum import Enum


class JavaVersion(Enum):
    """Java source-compatibility levels, named like Gradle's JavaVersion."""

    VERSION_1_1 = 1
    VERSION_1_2 = 2
    VERSION_1_3 = 3
    VERSION_1_4 = 4
    VERSION_1_5 = 5
    VERSION_1_6 = 6
    VERSION_1_7 = 7
    VERSION_1_8 = 8
    VERSION_1_9 = 9
    VERSION_1_10 = 10
    VERSION_11 = 11
    VERSION_12 = 12
    VERSION_13 = 13
    VERSION_14 = 14
    VERSION_15 = 15
    VERSION_16 = 16
    VERSION_17 = 17
    VERSION_18 = 18
    VERSION_19 = 19
    VERSION_20 = 20
    VERSION_21 = 21
    VERSION_HIGHER = 9999

    @property
    def is_java7(self) -> bool:
        return self is JavaVersion.VERSION_1_7

    @property
    def is_java8(self) -> bool:
        return self is JavaVersion.VERSION_1_8

    def __str__(self) -> str:
        if self is JavaVersion.VERSION_HIGHER:
            return "higher"
        if self.value <= 10:
            return f"1.{self.value}"
        return str(self.value)

    @classmethod
    def to_version(cls, value: "JavaVersion | str | int | float | None") -> "JavaVersion | None":
        """Parse a source-compatibility value.

        Accepts enum members, ``"1.8"``, ``"8"``, ``8``, ``1.8``,
        ``"VERSION_1_8"`` and ``"JavaVersion.VERSION_1_8"``.
        Floats go through their repr, so ``1.10`` reads as ``1.1``; pass
        such versions as strings.

        Args:
            value: Raw value as declared by the build.

        Returns:
            The parsed version, or None when the value is empty.

        Raises:
            ValueError: If the value is not a recognizable Java version.
        """
        if value is None:
            return None
        if isinstance(value, JavaVersion):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Could not determine java version from '{value}'.")
        if isinstance(value, float):
            value = repr(value)

        text = str(value).strip()
        if not text:
            return None

        text = text.removeprefix("JavaVersion.").removeprefix("VERSION_").replace("_", ".")
        match = re.fullmatch(r"(?:1\.)?(\d+)(?:\.\d+)*(?:[._-].*)?", text)
        if not match:
            raise ValueError(f"Could not determine java version from '{value}'.")

        major = int(match.group(1))
        if text.startswith("1.") and major == 0:
            raise ValueError(f"Could not determine java version from '{value}'.")
        if major < 1:
            raise ValueError(f"Could not determine java version from '{value}'.")
        return cls._from_major(major)

    @classmethod
    def _from_major(cls, major: int) -> "JavaVersion":
        for member in cls:
            if member.value == major:
                return member
        return cls.VERSION_HIGHER


class VersionTag(str, Enum):
    """Annotated JDK variant shipped by the Checker Framework."""

    JDK7 = "jdk7"
    JDK8 = "jdk8"
