import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from smartlink.rules.models import Rules

logger = logging.getLogger(__name__)

RULES_ENV_VAR = "SMARTLINK_RULES"
DATA_DIR_ENV_VAR = "SMARTLINK_DATA_DIR"
DEFAULT_RULES_PATH = Path("rules.yaml")


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    # Strip markdown code fences if the YAML is wrapped in a ```yaml block
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    clean_content = "\n".join(yaml_lines) if found_block else content

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def resolve_rules(path: Path | None = None) -> Rules:
    """
    Rules for this run.

    Uses ``path``, else $SMARTLINK_RULES, else ./rules.yaml; falls back to the
    built-in defaults when no file exists. $SMARTLINK_DATA_DIR overrides
    storage.data_dir.
    """
    if path is None:
        path = Path(os.environ.get(RULES_ENV_VAR, DEFAULT_RULES_PATH))

    if path.exists():
        rules = load_rules(path)
        logger.info("Rules loaded from %s", path)
    else:
        rules = Rules()
        logger.info("No rules file at %s, using defaults", path)

    data_dir = os.environ.get(DATA_DIR_ENV_VAR)
    if data_dir:
        rules.storage.data_dir = data_dir

    return rules
