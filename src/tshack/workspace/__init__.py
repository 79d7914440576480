"""Workspace layout, templates and filesystem operations."""

from .files import (
    copy_template,
    create_directory,
    create_project_from_template,
    create_standalone_file,
    delete_project,
    ensure_path_does_not_exist,
    list_projects,
    list_scripts,
    validate_name,
)
from .models import (
    InvalidNameError,
    ListFilter,
    PathExistsError,
    PlaygroundKind,
    TemplateNotFoundError,
    Workspace,
    WorkspaceError,
    WorkspaceIOError,
    script_filename,
)
from .templates import available_templates, get_template_path, get_templates_root

__all__ = [
    "InvalidNameError",
    "ListFilter",
    "PathExistsError",
    "PlaygroundKind",
    "TemplateNotFoundError",
    "Workspace",
    "WorkspaceError",
    "WorkspaceIOError",
    "available_templates",
    "copy_template",
    "create_directory",
    "create_project_from_template",
    "create_standalone_file",
    "delete_project",
    "ensure_path_does_not_exist",
    "get_template_path",
    "get_templates_root",
    "list_projects",
    "list_scripts",
    "script_filename",
    "validate_name",
]
