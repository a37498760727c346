"""
Spreadsheet Template Loader - Discovers and loads SpreadsheetTemplate YAML files.

Built-in templates live in spreadsheet/templates/ as .yaml files; users can
add their own directory. Each YAML file defines one template:

    id: standard_dictionary
    name: Standard Data Dictionary
    description: Row 1 header, data starts row 2
    data_start_row: 2
    name_col: A
    type_col: B
    comment_col: C
    pk_col: D
"""
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import yaml

from ..models import SpreadsheetTemplate
from .addressing import letter_to_index

logger = logging.getLogger(__name__)

# Default path for built-in templates
_DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


def template_from_dict(data: Dict, default_id: str = "") -> SpreadsheetTemplate:
    """
    Build a template from a parsed YAML mapping.

    Raises:
        ValueError: if data is not a mapping, required keys are missing or data_start_row < 1
        InvalidAddress: if a column letter is malformed
    """
    if not isinstance(data, dict):
        raise ValueError(f"Template must be a mapping, got {type(data).__name__}")
    missing = [k for k in ("data_start_row", "name_col", "type_col") if not data.get(k)]
    if missing:
        raise ValueError(f"Template is missing: {', '.join(missing)}")

    template = SpreadsheetTemplate(
        id=str(data.get("id") or default_id),
        name=str(data.get("name") or default_id),
        description=data.get("description") or "",
        data_start_row=int(data["data_start_row"]),
        name_col=str(data["name_col"]).strip().upper(),
        type_col=str(data["type_col"]).strip().upper(),
        comment_col=str(data.get("comment_col") or "").strip().upper() or None,
        pk_col=str(data.get("pk_col") or "").strip().upper() or None,
    )
    # Fail on bad letters at load time rather than at extraction time
    for letters in (template.name_col, template.type_col, template.comment_col, template.pk_col):
        if letters:
            letter_to_index(letters)
    return template


def template_to_dict(template: SpreadsheetTemplate) -> Dict:
    """Serializable mapping for a template, unset letters omitted."""
    data = asdict(template)
    return {k: v for k, v in data.items() if v not in (None, "")}


class SpreadsheetTemplateLoader:
    """
    Loads spreadsheet templates from YAML files.

    Usage:
        loader = SpreadsheetTemplateLoader()
        templates = loader.get_all_templates()
        template = loader.get_template("standard_dictionary")
    """

    def __init__(self, template_dirs: Optional[Sequence[Path]] = None,
                 include_builtin: bool = True):
        """
        Initialize the loader.

        Args:
            template_dirs: Extra directories with template YAML files.
                           Later directories override earlier ones by id.
            include_builtin: Whether to load the built-in templates first
        """
        dirs: List[Path] = [_DEFAULT_TEMPLATES_DIR] if include_builtin else []
        dirs.extend(Path(d) for d in (template_dirs or []))
        self.template_dirs = dirs
        self._cache: Dict[str, SpreadsheetTemplate] = {}
        self._loaded = False

    def _load_templates(self, force: bool = False):
        """Load all templates from YAML files."""
        if self._loaded and not force:
            return

        self._cache.clear()

        for directory in self.template_dirs:
            if not directory.exists():
                logger.warning(f"Template directory does not exist: {directory}")
                continue

            for yaml_file in sorted(directory.glob("*.yaml")):
                try:
                    template = self._load_template_file(yaml_file)
                except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                    logger.error(f"Error loading template {yaml_file}: {e}")
                    continue
                if template:
                    self._cache[template.id] = template
                    logger.debug(f"Loaded spreadsheet template: {template.id}")

        self._loaded = True
        logger.info(f"Loaded {len(self._cache)} spreadsheet templates")

    def _load_template_file(self, yaml_path: Path) -> Optional[SpreadsheetTemplate]:
        """Load a single template from a YAML file."""
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data:
            return None
        return template_from_dict(data, default_id=yaml_path.stem)

    def reload(self):
        """Re-read every template directory."""
        self._load_templates(force=True)

    def get_all_templates(self) -> List[SpreadsheetTemplate]:
        """Get all available templates."""
        self._load_templates()
        return list(self._cache.values())

    def get_template(self, template_id: str) -> Optional[SpreadsheetTemplate]:
        """Get a specific template by ID."""
        self._load_templates()
        return self._cache.get(template_id)

    def get_template_by_name(self, name: str) -> Optional[SpreadsheetTemplate]:
        """Get a template by id or display name (case-insensitive)."""
        self._load_templates()
        name_lower = name.lower()
        for template in self._cache.values():
            if template.id.lower() == name_lower or template.name.lower() == name_lower:
                return template
        return None

    def load_file(self, yaml_path: Path) -> SpreadsheetTemplate:
        """
        Load one template file outside of the catalog.

        Raises:
            ValueError: if the file is empty, not valid YAML or incomplete
        """
        try:
            template = self._load_template_file(Path(yaml_path))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid template file {yaml_path}: {e}") from e
        if template is None:
            raise ValueError(f"Empty template file: {yaml_path}")
        return template

    def save_template(self, template: SpreadsheetTemplate, directory: Path) -> Path:
        """
        Write a template as <id>.yaml and add it to the catalog.

        Returns:
            Path of the written file
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{template.id}.yaml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(template_to_dict(template), f, allow_unicode=True, sort_keys=False)

        self._load_templates()
        self._cache[template.id] = template
        if directory not in self.template_dirs:
            self.template_dirs.append(directory)
        logger.info(f"Saved spreadsheet template {template.id} to {path}")
        return path
