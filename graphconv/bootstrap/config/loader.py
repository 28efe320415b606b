import os
from pathlib import Path

CONFIG_ENV = "GRAPHCONV_CONFIG"


def get_configfile() -> Path | None:
    raw = os.getenv(CONFIG_ENV)

    # No file is fine: defaults and GRAPHCONV_* variables are enough
    if raw is None:
        return None

    file = Path(raw)

    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            f"  - Point {CONFIG_ENV} to an existing YAML file\n"
            f"  - Or unset {CONFIG_ENV} to use defaults and GRAPHCONV_* variables."
        )

    return file
