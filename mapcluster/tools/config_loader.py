"""
Configuration loader for clustering profiles and environment variables.
"""

import os
from pathlib import Path
from typing import Dict, Any, List, Optional
import yaml

from ..clustering.config import ClusteringConfig
from ..schemas import ClusterOptions


DEFAULT_PROFILE = "default"


class ConfigLoader:
    """Load and manage clustering configuration from YAML files and environment."""
    
    CONFIG_DIR = Path(__file__).parent.parent / "configs"
    
    @classmethod
    def available_profiles(cls) -> List[str]:
        return sorted(f.stem for f in cls.CONFIG_DIR.glob("*.yaml"))
    
    @classmethod
    def load_profile(cls, profile_name: str = DEFAULT_PROFILE) -> Dict[str, Any]:
        """
        Load a clustering profile.
        
        Args:
            profile_name: Name of the profile (default, dense, points-only, legacy)
            
        Returns:
            Dictionary with the raw option values
            
        Raises:
            FileNotFoundError: If profile doesn't exist
        """
        profile_path = cls.CONFIG_DIR / f"{profile_name}.yaml"
        
        if not profile_path.exists():
            raise FileNotFoundError(
                f"Profile '{profile_name}' not found. "
                f"Available profiles: {', '.join(cls.available_profiles())}"
            )
        
        with open(profile_path, "r") as f:
            return yaml.safe_load(f) or {}
    
    @classmethod
    def load_options(cls, profile_name: str = DEFAULT_PROFILE) -> ClusterOptions:
        """Load and validate a profile."""
        return ClusterOptions.model_validate(cls.load_profile(profile_name))
    
    @classmethod
    def get_profile_from_env(cls) -> Optional[str]:
        """Get profile name from CLUSTER_PROFILE environment variable."""
        return os.getenv("CLUSTER_PROFILE")
    
    @classmethod
    def load_default_or_env_profile(cls) -> ClusterOptions:
        """
        Load the profile named by the environment, or the default one.
        
        Returns:
            Validated cluster options
        """
        profile = cls.get_profile_from_env() or DEFAULT_PROFILE
        return cls.load_options(profile)


def get_config() -> ClusteringConfig:
    """Convenience function to get the current clustering configuration."""
    return ConfigLoader.load_default_or_env_profile().to_config()
