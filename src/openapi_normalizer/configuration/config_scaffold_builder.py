"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "normalizer.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for openapi-normalizer.
# Every setting is optional; delete the ones you do not need.

responses:
  # Description written into each response object, keyed by status code.
  # Supported status codes: 200, 201, 400, 401, 500.
  descriptions:
    "200": "成功回應"
    "201": "已建立"
    "400": "錯誤的請求"
    "401": "未授權"
    "500": "伺服器錯誤"

output:
  # Indentation used when writing the normalized document.
  # YAML output accepts 2 to 9; JSON output accepts any positive value.
  indent: 2
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with the default values and guidance comments."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

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
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
