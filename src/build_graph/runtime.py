"""Java runtime information exposed to the build."""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

from src.models.java import JavaVersion

# Jars that make up the platform boot classpath of a pre-9 JDK, in lookup order
BOOT_JARS = ["resources.jar", "rt.jar", "sunrsasign.jar", "jsse.jar", "jce.jar", "charsets.jar", "jfr.jar"]


@dataclass
class JavaRuntime:
    """The Java runtime the build is running on.

    Attributes:
        version: Version of the current runtime.
        boot_class_path: Platform boot classpath (``sun.boot.class.path``).
        java_home: Installation directory, when known.
    """

    version: JavaVersion
    boot_class_path: str = ""
    java_home: Path | None = field(default=None)

    @classmethod
    def detect(cls, java_home: Path | str | None = None) -> "JavaRuntime":
        """Describe the runtime installed at ``java_home``.

        The version is read from the ``release`` file every JDK ships; the
        boot classpath is assembled from the platform jars found under
        ``jre/lib`` (JDK) or ``lib`` (JRE).

        Args:
            java_home: Installation directory. Defaults to ``$JAVA_HOME``.

        Returns:
            JavaRuntime describing the installation.

        Raises:
            FileNotFoundError: If no installation can be located.
            ValueError: If the release file carries no parsable version.
        """
        home_value = java_home or os.environ.get("JAVA_HOME")
        if not home_value:
            raise FileNotFoundError("JAVA_HOME is not set and no java_home was given")

        home = Path(home_value)
        release = home / "release"
        if not release.is_file():
            raise FileNotFoundError(f"No release file in {home}")

        match = re.search(
            r'^JAVA_VERSION="?([^"\n]+)"?', release.read_text(encoding="utf-8"), re.MULTILINE
        )
        if not match:
            raise ValueError(f"JAVA_VERSION missing from {release}")
        version = JavaVersion.to_version(match.group(1))

        jars: list[str] = []
        for lib_dir in (home / "jre" / "lib", home / "lib"):
            for name in BOOT_JARS:
                jar = lib_dir / name
                if jar.is_file():
                    jars.append(str(jar))
            if jars:
                break

        return cls(version=version, boot_class_path=os.pathsep.join(jars), java_home=home)
