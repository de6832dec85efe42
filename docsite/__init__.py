"""Static HTML documentation sites from extracted namespace models."""

from .config import ConfigError, DocSiteConfig, load_config
from .loader import ModelError, load_project, project_from_dict
from .models import Deprecation, Namespace, Project, Var
from .writer import SiteWriter, write_docs

__all__ = [
    "ConfigError",
    "Deprecation",
    "DocSiteConfig",
    "ModelError",
    "Namespace",
    "Project",
    "SiteWriter",
    "Var",
    "load_config",
    "load_project",
    "project_from_dict",
    "write_docs",
]
