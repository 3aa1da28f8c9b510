"""Permissions Management"""
import logging
import yaml
from pathlib import Path
from typing import Dict, Iterable, List, Set

logger = logging.getLogger(__name__)

DEFAULT_PERMISSIONS_FILE = Path(__file__).parent.parent.parent / "permissions.yml"


class PermissionsManager:
    """
    Resolves roles to permissions from permissions.yml.

    Each role lists its own `permissions` and may `include` other roles,
    whose permissions it inherits:

        roles:
          authenticated:
            permissions: [ratings:write]
          admin:
            includes: [authenticated]
            permissions: [content:seed]
    """

    def __init__(self, permissions_file_path: str = None):
        self.roles = self._load_roles(Path(permissions_file_path or DEFAULT_PERMISSIONS_FILE))

    def _load_roles(self, file_path: Path) -> Dict[str, Dict]:
        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Could not load permissions from {file_path}: {e}")
            return {}
        return {name: definition or {} for name, definition in (data.get('roles') or {}).items()}

    def _collect(self, role: str, seen: Set[str]) -> Set[str]:
        if role in seen or role not in self.roles:
            return set()
        seen.add(role)
        definition = self.roles[role]
        permissions = set(definition.get('permissions') or [])
        for included in definition.get('includes') or []:
            permissions |= self._collect(included, seen)
        return permissions

    def get_permissions_for_roles(self, roles: Iterable[str]) -> List[str]:
        """Sorted union of the permissions of `roles` and every role they include. Unknown roles grant nothing."""
        permissions = set()
        seen: Set[str] = set()
        for role in roles:
            permissions |= self._collect(role, seen)
        return sorted(permissions)
