"""Plugin identifiers, configuration names, and artifact names."""

PLUGIN_ID = "org.checkerframework.checker"

# "com.android.base" only exists from Android Gradle plugin 3.0, so list each flavor
ANDROID_IDS = (
    "com.android.application",
    "com.android.feature",
    "com.android.instantapp",
    "com.android.library",
    "com.android.test",
)
JAVA_ID = "java"
SUPPORTED_IDS = ANDROID_IDS + (JAVA_ID,)

# Annotation processing plugin applied alongside the checker
APT_PLUGIN_ID = "net.ltgt.apt"

EXTENSION_NAME = "checkerFramework"

ANNOTATED_JDK_CONFIGURATION = "checkerFrameworkAnnotatedJDK"
ANNOTATED_JDK_CONFIGURATION_DESCRIPTION = (
    "A copy of JDK classes with Checker Framework type qualifiers inserted."
)
JAVAC_CONFIGURATION = "checkerFrameworkJavac"
JAVAC_CONFIGURATION_DESCRIPTION = (
    "A customization of the OpenJDK javac compiler with additional support for type annotations."
)
CONFIGURATION = "checkerFramework"
CONFIGURATION_DESCRIPTION = "The Checker Framework: custom pluggable types for Java."
JAVA_COMPILE_CONFIGURATION = "compile"
ANNOTATION_PROCESSOR_CONFIGURATION = "annotationProcessor"
TEST_ANNOTATION_PROCESSOR_CONFIGURATION = "testAnnotationProcessor"

COMPILER_ARTIFACT = "compiler"
CHECKER_ARTIFACT = "checker"
CHECKER_QUAL_ARTIFACT = "checker-qual"

BOOTCLASSPATH_PREPEND_ARG = "-Xbootclasspath/p:"
PROCESSOR_ARG = "-processor"
