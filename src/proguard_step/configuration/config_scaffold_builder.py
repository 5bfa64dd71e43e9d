"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "proguard-step.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Step configuration template for proguard-step.
# Replace every <REQUIRED> placeholder before running `proguard-step run`.
# Remove or fill <OPTIONAL> entries; an absent key keeps its documented default.

# Set to true (or export PROGUARD_SKIP=1) to disable the step.
skip: false

project:
  name: "<REQUIRED>"
  # jar: input defaults to <final_name>.jar; war: input defaults to the classes directory.
  packaging: jar
  final_name: "<REQUIRED>"
  # Relative paths below resolve against base_dir; base_dir resolves against this file.
  base_dir: "."
  # Resolved dependency artifacts of the project, in classpath order.
  # e.g. dependencies: ["libs/commons-lang3-3.14.0.jar"]
  dependencies: []

proguard:
  target_directory: target
  # Included with -include only when the file exists; null disables it.
  config_file: proguard.conf
  # injar: "<OPTIONAL>"
  # outjar: "<OPTIONAL>"
  in_filter: "!module-info.class,!META-INF/maven/**"
  out_filter: "!META-INF/maven/**"
  dependency_filter: "!module-info.class,!META-INF/**"
  # Pass dependencies to ProGuard, as -libraryjars or (include_dependency_injar) as -injars.
  include_dependency: true
  include_dependency_injar: false
  # Extra -libraryjars entries, passed verbatim, e.g. "<java.home>/jmods/java.base.jmod(!**.jar;!module-info.class)".
  libs: []
  # Raw ProGuard options; an empty list keeps the built-in keep rules.
  options: []

tool:
  java: java
  artifact_id: proguard-base
  main_class: proguard.ProGuard
  artifacts:
    - artifact_id: proguard-base
      path: "<REQUIRED>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML step configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder step configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Step configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
