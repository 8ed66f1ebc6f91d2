# Path: rosetta_verify/process/matcher/engine/description_loader.py
"""
Description Loader

Loads named Descriptions from YAML files in a descriptions directory.

Each file holds one Descriptions object in its JSON shape, plus an
optional `name` (defaults to the file stem):

    name: transfer
    err_unmatched: true
    opposite_amounts: [[0, 1]]
    operation_descriptions:
      - type: transfer
        account: {exists: true}
        amount: {exists: true, sign: negative}
      - type: transfer
        account: {exists: true}
        amount: {exists: true, sign: positive}
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ....core.errors import ParserError
from ....core.logger.ipo_logging import get_input_logger
from ....models.descriptions import Descriptions, summarize_errors


class DescriptionLoader:
    """
    Loads Descriptions from YAML files.

    Example:
        loader = DescriptionLoader(Path('descriptions'))
        descriptions = loader.load_all()
        transfer = descriptions['transfer']

        # Load single file
        name, transfer = loader.load_file(Path('descriptions/transfer.yaml'))
    """

    def __init__(self, descriptions_dir: Path):
        """
        Initialize description loader.

        Args:
            descriptions_dir: Directory scanned recursively for *.yaml / *.yml
        """
        self.logger = get_input_logger('matcher.description_loader')
        self.descriptions_dir = Path(descriptions_dir)
        self._cache: Optional[dict[str, Descriptions]] = None

    def load_all(self, use_cache: bool = True) -> dict[str, Descriptions]:
        """
        Load every description file in the directory.

        Args:
            use_cache: Whether to use cached results

        Returns:
            Dictionary mapping name to Descriptions

        Raises:
            ParserError: If a file cannot be parsed or a name is used twice
        """
        if use_cache and self._cache is not None:
            return self._cache

        loaded: dict[str, Descriptions] = {}

        if not self.descriptions_dir.exists():
            self.logger.warning(f"Descriptions directory not found: {self.descriptions_dir}")
            return loaded

        yaml_files = sorted(self.descriptions_dir.rglob('*.yaml'))
        yaml_files.extend(sorted(self.descriptions_dir.rglob('*.yml')))

        for yaml_file in yaml_files:
            name, descriptions = self.load_file(yaml_file)
            if name in loaded:
                raise ParserError(f"Duplicate descriptions name {name} in {yaml_file}")
            loaded[name] = descriptions

        self.logger.info(f"Loaded {len(loaded)} descriptions from {self.descriptions_dir}")
        self._cache = loaded
        return loaded

    def get(self, name: str) -> Descriptions:
        """
        Get Descriptions by name.

        Raises:
            ParserError: If no file defines the name
        """
        descriptions = self.load_all().get(name)
        if descriptions is None:
            raise ParserError(f"No descriptions named {name} in {self.descriptions_dir}")
        return descriptions

    def load_file(self, file_path: Path) -> tuple[str, Descriptions]:
        """
        Load one Descriptions from a YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            (name, Descriptions)

        Raises:
            ParserError: If the file is empty, malformed or invalid
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            self.logger.error(f"YAML parse error in {file_path}: {e}")
            raise ParserError(f"YAML parse error in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ParserError(f"{file_path} does not hold a descriptions mapping")

        name = str(data.pop('name', Path(file_path).stem))

        try:
            descriptions = Descriptions.model_validate(data)
        except ValidationError as e:
            self.logger.error(f"Invalid descriptions in {file_path}: {e}")
            raise ParserError(
                f"Invalid descriptions in {file_path}: {summarize_errors(e)}"
            ) from e

        self.logger.debug(
            f"Loaded descriptions {name} with "
            f"{len(descriptions.operation_descriptions)} operation descriptions"
        )
        return name, descriptions


__all__ = ['DescriptionLoader']
