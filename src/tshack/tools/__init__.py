"""External tools tshack drives: editor, package manager, shell."""

from .editor import editor_command, open_in_editor
from .package_manager import create_command, create_with_package_manager, install_command, install_dependencies
from .shell import default_shell, open_shell

__all__ = [
    "create_command",
    "create_with_package_manager",
    "default_shell",
    "editor_command",
    "install_command",
    "install_dependencies",
    "open_in_editor",
    "open_shell",
]
