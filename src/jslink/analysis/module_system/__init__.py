"""Module system: name normalization, path resolution, module building."""

from .module_info import AbstractModule, Module, ExportedModule, ImportRecord, ModuleExport, module_alias
from .name_normalizer import normalize_name, is_relative_name
from .path_resolver import PathResolver
from .module_builder import ModuleBuilder

__all__ = [
    'AbstractModule',
    'Module',
    'ExportedModule',
    'ImportRecord',
    'ModuleExport',
    'module_alias',
    'normalize_name',
    'is_relative_name',
    'PathResolver',
    'ModuleBuilder',
]
