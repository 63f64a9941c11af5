"""Profile loader - reads sticky sidebar options from YAML files."""

from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from .errors import OptionsError
from .options import StickySidebarOptions


class ProfileLoader:
    """Loads and validates sidebar profiles.

    A profile is a YAML mapping with an optional ``name`` and a ``sidebar``
    section whose keys mirror :class:`StickySidebarOptions`::

        name: Docs layout
        sidebar:
          top_spacing: 20
          bottom_spacing: 20
          min_width: 640
    """

    def __init__(self):
        self.loaded_profiles: Dict[str, Dict[str, Any]] = {}

    def load_profile(self, profile_path: Path) -> Optional[Dict[str, Any]]:
        """Load and validate a profile file.

        Args:
            profile_path: Path to YAML profile file

        Returns:
            Profile dict or None if invalid
        """
        profile_path = Path(profile_path)
        try:
            with open(profile_path, 'r', encoding='utf-8') as f:
                profile_data = yaml.safe_load(f)

            if not profile_data:
                print(f"[PROFILE] Empty profile file: {profile_path}")
                return None

            valid, error = self.validate_structure(profile_data)
            if not valid:
                print(f"[PROFILE] Invalid profile {profile_path.name}: {error}")
                return None

            self.loaded_profiles[profile_path.stem] = profile_data
            return profile_data

        except yaml.YAMLError as e:
            print(f"[PROFILE] YAML parse error in {profile_path.name}: {e}")
            return None
        except FileNotFoundError:
            print(f"[PROFILE] Profile file not found: {profile_path}")
            return None
        except OSError as e:
            print(f"[PROFILE] Error loading profile {profile_path.name}: {e}")
            return None

    @staticmethod
    def validate_structure(profile_data) -> tuple[bool, str]:
        """Check top-level shape and option names of a profile."""
        if not isinstance(profile_data, dict):
            return False, "Profile must be a mapping"

        sidebar = profile_data.get('sidebar', {})
        if not isinstance(sidebar, dict):
            return False, "'sidebar' must be a mapping"

        known = set(StickySidebarOptions.field_names())
        unknown = sorted(str(key) for key in sidebar if key not in known)
        if unknown:
            return False, f"Unknown sidebar options: {', '.join(unknown)}"

        try:
            StickySidebarOptions.extend(None, sidebar).validate()
        except OptionsError as e:
            return False, str(e)
        return True, ""

    def apply_profile(
        self,
        profile_data: Optional[Dict[str, Any]],
        base: Optional[StickySidebarOptions] = None,
    ) -> StickySidebarOptions:
        """Merge a loaded profile's ``sidebar`` section over ``base``."""
        base = base if base is not None else StickySidebarOptions()
        if not profile_data:
            return base
        return StickySidebarOptions.extend(base, profile_data.get('sidebar') or {})

    def list_available_profiles(self, profile_dirs: list[Path]) -> list[Dict[str, Any]]:
        """List all valid profiles found in ``profile_dirs``."""
        profiles = []

        for profile_dir in profile_dirs:
            if not profile_dir.exists():
                continue

            for profile_file in sorted(profile_dir.glob('*.yaml')):
                profile_data = self.load_profile(profile_file)
                if profile_data:
                    profiles.append({
                        'name': profile_data.get('name', profile_file.stem),
                        'path': profile_file,
                        'data': profile_data,
                    })

        return profiles
