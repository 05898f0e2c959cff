# ============================================================================
# src/critical_medications/config/base_config.py
# ============================================================================
"""
Registry Configuration
- Project root
- Data directory
- Drug alias dataset and critical medication artifact paths
"""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class RegistrySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CRITICAL_MEDS_")

    # Root project directory
    PROJECT_ROOT: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent.parent.parent,
        description="Root directory of the project"
    )

    # Relative paths are resolved against PROJECT_ROOT
    DATA_DIR: Path = Field(
        default=Path("data"),
        description="Directory holding the alias dataset and the generated registry"
    )

    ALIASES_FILENAME: str = Field(
        default="drug_aliases.json",
        description="Canonical drug alias dataset (JSON array of {name, aliases})"
    )

    OUTPUT_FILENAME: str = Field(
        default="critical_medications.json",
        description="Generated critical medication registry ({category: [names]})"
    )

    @property
    def data_dir(self) -> Path:
        """Data directory resolved against the project root"""
        if self.DATA_DIR.is_absolute():
            return self.DATA_DIR
        return self.PROJECT_ROOT / self.DATA_DIR

    @property
    def aliases_path(self) -> Path:
        return self.data_dir / self.ALIASES_FILENAME

    @property
    def output_path(self) -> Path:
        return self.data_dir / self.OUTPUT_FILENAME

# Global instance
registry_settings = RegistrySettings()
